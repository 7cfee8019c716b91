"""
목적: 임베딩 생성 클라이언트를 제공한다.
설명: LangChain Embeddings를 감싸 줄바꿈 정규화, 재시도, 응답 검증, 실패 예외 변환을 통합한다.
디자인 패턴: 프록시
참조: src/doc_chat/shared/runtime/retry.py, src/doc_chat/shared/exceptions/errors.py
"""

from __future__ import annotations

import re
import time
from typing import Optional, Sequence

from langchain_core.embeddings import Embeddings

from doc_chat.shared.exceptions import EmbeddingFailure
from doc_chat.shared.logging import Logger, create_default_logger
from doc_chat.shared.runtime import RetryExhaustedError, RetryPolicy, call_with_retry

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def normalize_newlines(text: str) -> str:
    """줄바꿈 문자를 공백 하나로 치환한다."""

    return _NEWLINE_PATTERN.sub(" ", text)


class EmbeddingClient:
    """임베딩 서비스 호출 클라이언트이다.

    단건 호출은 크기 1 배치 호출과 동일하게 처리한다.

    Args:
        embedder: 실제 임베딩 모델.
        retry_policy: 외부 호출 재시도 정책.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        embedder: Embeddings,
        retry_policy: Optional[RetryPolicy] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._embedder = embedder
        self._retry_policy = retry_policy or RetryPolicy()
        self._logger = logger or create_default_logger("EmbeddingClient")

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """텍스트 목록을 입력 순서대로 임베딩한다."""

        if not texts:
            return []
        normalized = [normalize_newlines(text) for text in texts]
        start = time.monotonic()

        def _on_retry(attempt: int, error: Exception, delay: float) -> None:
            self._logger.warning(
                f"임베딩 호출 재시도: attempt={attempt}, delay={delay:.2f}s, error={error}",
                metadata={"batch_size": len(normalized)},
            )

        try:
            vectors = call_with_retry(
                lambda: self._embedder.embed_documents(normalized),
                policy=self._retry_policy,
                on_retry=_on_retry,
            )
        except RetryExhaustedError as exhausted:
            self._logger.error(
                f"임베딩 호출 실패: {exhausted.last_error}",
                metadata={
                    "batch_size": len(normalized),
                    "attempts": exhausted.attempts,
                    "duration_ms": int((time.monotonic() - start) * 1000),
                },
            )
            raise EmbeddingFailure.from_error(
                exhausted.last_error,
                attempts=exhausted.attempts,
                batch_size=len(normalized),
            ) from exhausted.last_error

        result = self._validate(vectors, expected=len(normalized))
        self._logger.info(
            "임베딩 호출 성공",
            metadata={
                "batch_size": len(normalized),
                "dimension": len(result[0]),
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return result

    def embed_one(self, text: str) -> list[float]:
        """단일 텍스트를 임베딩한다."""

        return self.embed_batch([text])[0]

    def _validate(self, vectors: object, *, expected: int) -> list[list[float]]:
        if not isinstance(vectors, list) or len(vectors) != expected:
            actual = len(vectors) if isinstance(vectors, list) else type(vectors).__name__
            raise EmbeddingFailure.from_cause(
                f"임베딩 응답 개수가 일치하지 않습니다. expected={expected}, actual={actual}"
            )
        result: list[list[float]] = []
        for vector in vectors:
            if not vector:
                raise EmbeddingFailure.from_cause("빈 임베딩 벡터가 반환되었습니다.")
            result.append([float(value) for value in vector])
        return result


__all__ = ["EmbeddingClient", "normalize_newlines"]
