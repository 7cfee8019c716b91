"""
목적: 문서 API 모델 공개 API를 제공한다.
설명: 업로드/질문 요청과 응답 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/documents/models/upload.py, src/doc_chat/api/documents/models/chat.py
"""

from doc_chat.api.documents.models.chat import ChatRequest, ChatResponse, SourceResponse
from doc_chat.api.documents.models.upload import UploadDocumentRequest, UploadDocumentResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "SourceResponse",
    "UploadDocumentRequest",
    "UploadDocumentResponse",
]
