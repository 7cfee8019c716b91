"""
목적: RAG 파이프라인 외부 연동 실패 예외를 정의한다.
설명: 임베딩/인덱스 쓰기/인덱스 조회/응답 생성 실패를 에러 코드와 함께 구분한다.
디자인 패턴: 도메인 예외 계층
참조: src/doc_chat/shared/exceptions/base.py, src/doc_chat/shared/runtime/retry.py
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from doc_chat.shared.exceptions.base import BaseAppException
from doc_chat.shared.exceptions.models import ExceptionDetail


class PipelineFailure(BaseAppException):
    """외부 서비스 연동 실패의 공통 부모 예외이다.

    하위 클래스는 `CODE`와 `DEFAULT_MESSAGE`만 정의한다.
    """

    CODE: ClassVar[str] = "PIPELINE_FAILURE"
    DEFAULT_MESSAGE: ClassVar[str] = "파이프라인 외부 호출에 실패했습니다."

    @classmethod
    def from_error(
        cls,
        error: Exception,
        *,
        message: Optional[str] = None,
        hint: Optional[str] = None,
        **metadata: Any,
    ) -> "PipelineFailure":
        """원본 예외를 감싸 실패 예외를 생성한다."""

        if isinstance(error, TimeoutError) or "timeout" in type(error).__name__.lower():
            metadata.setdefault("timeout", True)
        detail = ExceptionDetail(
            code=cls.CODE,
            cause=f"{type(error).__name__}: {error}",
            hint=hint,
            metadata=metadata,
        )
        return cls(message or cls.DEFAULT_MESSAGE, detail, error)

    @classmethod
    def from_cause(cls, cause: str, **metadata: Any) -> "PipelineFailure":
        """원본 예외 없이 원인 문자열로 실패 예외를 생성한다."""

        detail = ExceptionDetail(code=cls.CODE, cause=cause, metadata=metadata)
        return cls(cls.DEFAULT_MESSAGE, detail)


class EmbeddingFailure(PipelineFailure):
    """임베딩 서비스 호출 실패."""

    CODE = "EMBEDDING_FAILURE"
    DEFAULT_MESSAGE = "임베딩 생성에 실패했습니다."


class IndexWriteFailure(PipelineFailure):
    """벡터 인덱스 쓰기 실패."""

    CODE = "INDEX_WRITE_FAILURE"
    DEFAULT_MESSAGE = "벡터 인덱스 쓰기에 실패했습니다."


class IndexQueryFailure(PipelineFailure):
    """벡터 인덱스 조회 실패."""

    CODE = "INDEX_QUERY_FAILURE"
    DEFAULT_MESSAGE = "벡터 인덱스 조회에 실패했습니다."


class CompletionFailure(PipelineFailure):
    """응답 생성 모델 호출 실패."""

    CODE = "COMPLETION_FAILURE"
    DEFAULT_MESSAGE = "LLM 응답 생성에 실패했습니다."


__all__ = [
    "PipelineFailure",
    "EmbeddingFailure",
    "IndexWriteFailure",
    "IndexQueryFailure",
    "CompletionFailure",
]
