"""
목적: 외부 호출용 재시도 정책을 제공한다.
설명: 지수 백오프 기반의 제한 재시도를 수행하고, 소진 시 시도 횟수와 마지막 오류를 담아 예외를 던진다.
디자인 패턴: 정책 객체 패턴
참조: src/doc_chat/integrations/embedding/client.py, src/doc_chat/integrations/db/client.py, src/doc_chat/integrations/llm/client.py
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class RetryPolicy(BaseModel):
    """재시도 정책 모델이다.

    Args:
        max_attempts: 첫 호출을 포함한 최대 시도 횟수.
        initial_backoff: 첫 재시도 전 대기 시간(초).
        max_backoff: 대기 시간 상한(초).
        multiplier: 재시도마다 대기 시간에 곱하는 배수.
        non_retryable: 즉시 포기할 예외 타입 목록.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    max_attempts: int = Field(default=3, ge=1)
    initial_backoff: float = Field(default=0.5, ge=0)
    max_backoff: float = Field(default=8.0, ge=0)
    multiplier: float = Field(default=2.0, ge=1.0)
    non_retryable: tuple[type[BaseException], ...] = (ValueError, TypeError, KeyError)

    def backoff_for(self, attempt: int) -> float:
        """`attempt`번째 실패 이후의 대기 시간을 계산한다(1부터 시작)."""

        delay = self.initial_backoff * (self.multiplier ** max(0, attempt - 1))
        return min(delay, self.max_backoff)

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """재시도하지 않는 정책을 생성한다."""

        return cls(max_attempts=1, initial_backoff=0.0)


class RetryExhaustedError(Exception):
    """재시도를 모두 소진했거나 재시도 불가 오류가 발생했음을 나타낸다."""

    def __init__(self, attempts: int, last_error: Exception) -> None:
        super().__init__(f"{attempts}회 시도 후 실패: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


def call_with_retry(
    fn: Callable[[], T],
    *,
    policy: RetryPolicy,
    on_retry: Callable[[int, Exception, float], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """정책에 따라 `fn`을 호출한다.

    Args:
        fn: 인자 없는 호출 대상.
        policy: 재시도 정책.
        on_retry: 재시도 직전 호출되는 콜백(attempt, error, delay).
        sleep: 대기 함수. 테스트에서 주입한다.

    Raises:
        RetryExhaustedError: 시도를 모두 소진했거나 재시도 불가 오류가 발생한 경우.
    """

    attempt = 0
    while True:
        attempt += 1
        try:
            return fn()
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            if isinstance(error, policy.non_retryable) or attempt >= policy.max_attempts:
                raise RetryExhaustedError(attempt, error) from error
            delay = policy.backoff_for(attempt)
            if on_retry is not None:
                on_retry(attempt, error, delay)
            if delay > 0:
                sleep(delay)


__all__ = ["RetryPolicy", "RetryExhaustedError", "call_with_retry"]
