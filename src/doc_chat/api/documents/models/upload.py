"""
목적: 문서 업로드 API 모델을 정의한다.
설명: 업로드 요청/응답 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/doc_chat/api/documents/routers/upload_document.py
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UploadDocumentRequest(BaseModel):
    """문서 업로드 요청 모델."""

    name: str = Field(..., min_length=1, description="문서 이름(질문 시 필터 키)")
    text: str = Field(..., description="문서 원문")


class UploadDocumentResponse(BaseModel):
    """문서 업로드 응답 모델.

    실패 시 `success`는 False이고 `code`에 에러 코드를 담는다.
    """

    success: bool
    code: Optional[str] = None
