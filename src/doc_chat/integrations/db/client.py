"""
목적: 벡터 인덱스 호출 클라이언트를 제공한다.
설명: 엔진 호출에 배치 크기 제한, 재시도, 실패 예외 변환, 로깅을 적용한다.
디자인 패턴: 프록시
참조: src/doc_chat/integrations/db/base/engine.py, src/doc_chat/shared/runtime/retry.py
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Optional, Sequence, TypeVar

from doc_chat.integrations.db.base.engine import BaseVectorIndex
from doc_chat.integrations.db.base.models import QueryMatch, VectorRecord
from doc_chat.shared.exceptions import IndexQueryFailure, IndexWriteFailure, PipelineFailure
from doc_chat.shared.logging import Logger, create_default_logger
from doc_chat.shared.runtime import RetryExhaustedError, RetryPolicy, call_with_retry

T = TypeVar("T")

DEFAULT_MAX_BATCH_SIZE = 100


class VectorIndexClient:
    """벡터 인덱스 엔진 호출 클라이언트이다.

    Args:
        engine: 실제 인덱스 엔진.
        max_batch_size: 업서트 1회당 최대 레코드 수.
        retry_policy: 외부 호출 재시도 정책.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        engine: BaseVectorIndex,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        retry_policy: Optional[RetryPolicy] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        if max_batch_size < 1:
            raise ValueError("max_batch_size는 1 이상이어야 합니다.")
        self._engine = engine
        self._max_batch_size = max_batch_size
        self._retry_policy = retry_policy or RetryPolicy()
        self._logger = logger or create_default_logger("VectorIndexClient")

    @property
    def engine(self) -> BaseVectorIndex:
        return self._engine

    @property
    def max_batch_size(self) -> int:
        return self._max_batch_size

    def upsert(self, records: Sequence[VectorRecord]) -> None:
        """레코드 배치를 업서트한다. 빈 배치는 호출하지 않는다."""

        if not records:
            return
        if len(records) > self._max_batch_size:
            raise ValueError(
                f"업서트 배치 크기 초과: size={len(records)}, max={self._max_batch_size}"
            )
        self._call(
            "upsert",
            lambda: self._engine.upsert(list(records)),
            IndexWriteFailure,
            batch_size=len(records),
        )

    def query(
        self,
        vector: Sequence[float],
        top_k: int,
        document_name: str,
        include_vectors: bool = False,
    ) -> list[QueryMatch]:
        """문서 범위 유사도 검색을 수행한다."""

        if top_k < 1:
            raise ValueError("top_k는 1 이상이어야 합니다.")
        return self._call(
            "query",
            lambda: self._engine.query(
                vector,
                top_k,
                document_name,
                include_vectors=include_vectors,
            ),
            IndexQueryFailure,
            top_k=top_k,
            document_name=document_name,
        )

    def delete_document(self, document_name: str) -> None:
        """문서의 모든 레코드를 삭제한다."""

        self._call(
            "delete_document",
            lambda: self._engine.delete_document(document_name),
            IndexWriteFailure,
            document_name=document_name,
        )

    def count(self, document_name: Optional[str] = None) -> int:
        return self._call(
            "count",
            lambda: self._engine.count(document_name),
            IndexQueryFailure,
            document_name=document_name,
        )

    def _call(
        self,
        operation: str,
        fn: Callable[[], T],
        failure: type[PipelineFailure],
        **metadata: object,
    ) -> T:
        start = time.monotonic()

        def _on_retry(attempt: int, error: Exception, delay: float) -> None:
            self._logger.warning(
                f"벡터 인덱스 {operation} 재시도: attempt={attempt}, delay={delay:.2f}s, error={error}",
                metadata={"engine": self._engine.name, **metadata},
            )

        try:
            result = call_with_retry(fn, policy=self._retry_policy, on_retry=_on_retry)
        except RetryExhaustedError as exhausted:
            self._logger.error(
                f"벡터 인덱스 {operation} 실패: {exhausted.last_error}",
                metadata={
                    "engine": self._engine.name,
                    "attempts": exhausted.attempts,
                    "duration_ms": int((time.monotonic() - start) * 1000),
                    **metadata,
                },
            )
            raise failure.from_error(
                exhausted.last_error,
                attempts=exhausted.attempts,
                operation=operation,
                engine=self._engine.name,
            ) from exhausted.last_error

        self._logger.debug(
            f"벡터 인덱스 {operation} 완료",
            metadata={
                "engine": self._engine.name,
                "duration_ms": int((time.monotonic() - start) * 1000),
                **metadata,
            },
        )
        return result


__all__ = ["DEFAULT_MAX_BATCH_SIZE", "VectorIndexClient"]
