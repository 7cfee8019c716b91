"""
목적: 문서 API 라우터 공개 API를 제공한다.
설명: 집계 라우터를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/documents/routers/router.py
"""

from doc_chat.api.documents.routers.router import router

__all__ = ["router"]
