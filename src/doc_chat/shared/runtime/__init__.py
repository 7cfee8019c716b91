"""
목적: 런타임 모듈 공개 API를 제공한다.
설명: 외부 호출 재시도 정책과 실행 함수를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/shared/runtime/retry.py
"""

from doc_chat.shared.runtime.retry import RetryExhaustedError, RetryPolicy, call_with_retry

__all__ = ["RetryPolicy", "RetryExhaustedError", "call_with_retry"]
