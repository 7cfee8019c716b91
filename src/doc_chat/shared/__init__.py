"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 예외/로깅/런타임 공통 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/shared/exceptions, src/doc_chat/shared/logging, src/doc_chat/shared/runtime
"""

from doc_chat.shared.exceptions import BaseAppException, ExceptionDetail, PipelineFailure
from doc_chat.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)
from doc_chat.shared.runtime import RetryExhaustedError, RetryPolicy, call_with_retry

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "PipelineFailure",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "create_default_logger",
    "RetryPolicy",
    "RetryExhaustedError",
    "call_with_retry",
]
