"""
목적: 파이프라인 공통 예외 베이스 클래스를 제공한다.
설명: 메시지와 에러 코드가 담긴 상세 모델, 원본 예외를 함께 보관한다.
      라우터는 `code`로 응답 코드를 정하고 `to_dict()`를 로그 메타데이터로 남긴다.
디자인 패턴: 도메인 예외 객체
참조: src/doc_chat/shared/exceptions/models.py, src/doc_chat/api/documents/routers/common.py
"""

from __future__ import annotations

from typing import Any, Optional

from doc_chat.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외 클래스이다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 에러 코드와 원인을 담은 상세 모델.
        original: 원본 예외 객체.
    """

    def __init__(
        self,
        message: str,
        detail: ExceptionDetail,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail
        self._original = original

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str:
        """응답 본문에 노출하는 에러 코드."""

        return self._detail.code

    @property
    def detail(self) -> ExceptionDetail:
        return self._detail

    @property
    def original(self) -> Optional[Exception]:
        return self._original

    def __str__(self) -> str:
        return f"[{self.code}] {self._message}"

    def to_dict(self) -> dict[str, Any]:
        """로그 메타데이터용 사전을 만든다. 원본 예외는 repr로만 남긴다."""

        return {
            "code": self.code,
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }
