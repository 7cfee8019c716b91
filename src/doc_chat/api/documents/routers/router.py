"""
목적: 문서 API 라우터 집계를 제공한다.
설명: 엔드포인트별 분리 라우터를 하나의 `/api` 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/doc_chat/api/documents/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from doc_chat.api.documents.routers.chat import router as chat_router
from doc_chat.api.documents.routers.upload_document import router as upload_document_router

router = APIRouter(prefix="/api", tags=["documents"])
router.include_router(upload_document_router)
router.include_router(chat_router)
