"""
목적: LangChain BaseChatModel 기반 LLM 클라이언트를 제공한다.
설명: invoke/ainvoke 경로에 로깅, 재시도, 실패 예외(CompletionFailure) 변환을 통합한다.
디자인 패턴: 프록시, 데코레이터
참조: src/doc_chat/shared/logging, src/doc_chat/shared/exceptions, src/doc_chat/shared/runtime/retry.py
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Optional, Sequence

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.outputs import ChatResult
from pydantic import ConfigDict, PrivateAttr

from doc_chat.shared.exceptions import CompletionFailure
from doc_chat.shared.logging import Logger, LogLevel, create_default_logger
from doc_chat.shared.runtime import RetryExhaustedError, RetryPolicy, call_with_retry


class LLMClient(BaseChatModel):
    """로깅/재시도/예외 처리를 포함한 LLM 클라이언트 래퍼이다."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _model: BaseChatModel = PrivateAttr()
    _logger: Logger = PrivateAttr()
    _name: str = PrivateAttr()
    _retry_policy: RetryPolicy = PrivateAttr()

    def __init__(
        self,
        model: BaseChatModel,
        name: str = "llm-client",
        logger: Optional[Logger] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        super().__init__()
        self._model = model
        self._name = name
        self._logger = logger or create_default_logger(name)
        self._retry_policy = retry_policy or RetryPolicy()

    @property
    def model(self) -> BaseChatModel:
        """내부 모델을 반환한다."""

        return self._model

    @property
    def _llm_type(self) -> str:
        base_type = getattr(self._model, "_llm_type", None)
        if base_type:
            return f"logged-{base_type}"
        return "logged-chat-model"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("invoke", messages, kwargs)
        try:
            result = call_with_retry(
                lambda: self._model._generate(
                    messages,
                    stop=stop,
                    run_manager=run_manager,
                    **kwargs,
                ),
                policy=self._retry_policy,
                on_retry=lambda attempt, error, delay: self._log_retry("invoke", attempt, error, delay),
            )
        except RetryExhaustedError as exhausted:
            self._log_error("invoke", exhausted, start)
            raise CompletionFailure.from_error(
                exhausted.last_error,
                attempts=exhausted.attempts,
                model_name=self._name,
            ) from exhausted.last_error
        self._log_success("invoke", start)
        return result

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("ainvoke", messages, kwargs)
        attempt = 0
        while True:
            attempt += 1
            try:
                result = await self._model._agenerate(
                    messages,
                    stop=stop,
                    run_manager=run_manager,
                    **kwargs,
                )
                break
            except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
                policy = self._retry_policy
                if isinstance(error, policy.non_retryable) or attempt >= policy.max_attempts:
                    exhausted = RetryExhaustedError(attempt, error)
                    self._log_error("ainvoke", exhausted, start)
                    raise CompletionFailure.from_error(
                        error,
                        attempts=attempt,
                        model_name=self._name,
                    ) from error
                delay = policy.backoff_for(attempt)
                self._log_retry("ainvoke", attempt, error, delay)
                await asyncio.sleep(delay)
        self._log_success("ainvoke", start)
        return result

    def _log_start(self, action: str, messages: Sequence[BaseMessage], kwargs: dict) -> None:
        self._logger.log(
            LogLevel.INFO,
            f"LLM {action} 호출 시작",
            metadata={
                **self._base_metadata(action),
                "message_count": len(messages),
                "kwargs": list(kwargs.keys()),
            },
        )

    def _log_retry(self, action: str, attempt: int, error: Exception, delay: float) -> None:
        self._logger.log(
            LogLevel.WARNING,
            f"LLM {action} 호출 재시도: {error}",
            metadata={**self._base_metadata(action), "attempt": attempt, "delay": delay},
        )

    def _log_success(self, action: str, start: float) -> None:
        self._logger.log(
            LogLevel.INFO,
            f"LLM {action} 호출 성공",
            metadata={
                **self._base_metadata(action),
                "duration_ms": int((time.monotonic() - start) * 1000),
                "success": True,
            },
        )

    def _log_error(self, action: str, exhausted: RetryExhaustedError, start: float) -> None:
        self._logger.log(
            LogLevel.ERROR,
            f"LLM {action} 호출 실패: {exhausted.last_error}",
            metadata={
                **self._base_metadata(action),
                "duration_ms": int((time.monotonic() - start) * 1000),
                "error_type": type(exhausted.last_error).__name__,
                "attempts": exhausted.attempts,
                "success": False,
            },
        )

    def _base_metadata(self, action: str) -> dict:
        return {
            "action": action,
            "model_name": self._name,
            "llm_type": getattr(self._model, "_llm_type", None),
        }


__all__ = ["LLMClient"]
