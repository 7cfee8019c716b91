"""
목적: 인메모리 벡터 인덱스 엔진을 제공한다.
설명: 프로세스 메모리에 레코드를 보관하고 코사인 유사도로 문서 범위 검색을 수행한다.
디자인 패턴: 전략 패턴
참조: src/doc_chat/integrations/db/base/engine.py
"""

from __future__ import annotations

import math
from threading import Lock
from typing import Dict, List, Optional, Sequence

from doc_chat.integrations.db.base.engine import BaseVectorIndex
from doc_chat.integrations.db.base.models import QueryMatch, VectorRecord


def cosine_similarity(left: Sequence[float], right: Sequence[float]) -> float:
    """두 벡터의 코사인 유사도를 계산한다. 영벡터는 0.0으로 처리한다."""

    if len(left) != len(right):
        raise ValueError(f"벡터 차원이 일치하지 않습니다. left={len(left)}, right={len(right)}")
    dot = sum(a * b for a, b in zip(left, right))
    left_norm = math.sqrt(sum(a * a for a in left))
    right_norm = math.sqrt(sum(b * b for b in right))
    if left_norm == 0.0 or right_norm == 0.0:
        return 0.0
    return dot / (left_norm * right_norm)


class InMemoryVectorIndex(BaseVectorIndex):
    """테스트와 로컬 실행을 위한 인메모리 엔진."""

    def __init__(self) -> None:
        self._records: Dict[str, VectorRecord] = {}
        self._lock = Lock()

    @property
    def name(self) -> str:
        return "memory"

    def upsert(self, records: Sequence[VectorRecord]) -> None:
        with self._lock:
            for record in records:
                self._records[record.id] = record

    def query(
        self,
        vector: Sequence[float],
        top_k: int,
        document_name: str,
        include_vectors: bool = False,
    ) -> List[QueryMatch]:
        if top_k <= 0:
            return []
        with self._lock:
            candidates = [
                record
                for record in self._records.values()
                if record.metadata.document_name == document_name
            ]

        matches = [
            QueryMatch(
                record_id=record.id,
                score=cosine_similarity(vector, record.embedding),
                metadata=record.metadata,
                embedding=list(record.embedding) if include_vectors else None,
            )
            for record in candidates
        ]
        # 동점은 ID 순서로 고정한다.
        matches.sort(key=lambda item: (-item.score, item.record_id))
        return matches[:top_k]

    def delete_document(self, document_name: str) -> None:
        with self._lock:
            stale = [
                record_id
                for record_id, record in self._records.items()
                if record.metadata.document_name == document_name
            ]
            for record_id in stale:
                del self._records[record_id]

    def count(self, document_name: Optional[str] = None) -> int:
        with self._lock:
            if document_name is None:
                return len(self._records)
            return sum(
                1
                for record in self._records.values()
                if record.metadata.document_name == document_name
            )

    def get(self, record_id: str) -> Optional[VectorRecord]:
        """ID로 레코드를 조회한다."""

        with self._lock:
            return self._records.get(record_id)
