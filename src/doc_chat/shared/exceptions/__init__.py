"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델과 베이스/파이프라인 예외 클래스를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/shared/exceptions/models.py, src/doc_chat/shared/exceptions/base.py, src/doc_chat/shared/exceptions/errors.py
"""

from doc_chat.shared.exceptions.base import BaseAppException
from doc_chat.shared.exceptions.errors import (
    CompletionFailure,
    EmbeddingFailure,
    IndexQueryFailure,
    IndexWriteFailure,
    PipelineFailure,
)
from doc_chat.shared.exceptions.models import ExceptionDetail

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "PipelineFailure",
    "EmbeddingFailure",
    "IndexWriteFailure",
    "IndexQueryFailure",
    "CompletionFailure",
]
