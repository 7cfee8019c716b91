"""
목적: 벡터 인덱스 엔진 추상 인터페이스를 정의한다.
설명: 업서트, 문서 범위 유사도 검색, 문서 단위 삭제, 건수 조회를 위한 표준 메서드를 제공한다.
디자인 패턴: 전략 패턴
참조: src/doc_chat/integrations/db/base/models.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from doc_chat.integrations.db.base.models import QueryMatch, VectorRecord


class BaseVectorIndex(ABC):
    """벡터 인덱스 엔진 인터페이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    def connect(self) -> None:
        """연결을 초기화한다. 연결이 필요 없는 엔진은 재정의하지 않는다."""

    def close(self) -> None:
        """연결을 종료한다."""

    @abstractmethod
    def upsert(self, records: Sequence[VectorRecord]) -> None:
        """레코드를 삽입하거나 같은 ID를 덮어쓴다."""

    @abstractmethod
    def query(
        self,
        vector: Sequence[float],
        top_k: int,
        document_name: str,
        include_vectors: bool = False,
    ) -> List[QueryMatch]:
        """`document_name` 문서 범위에서 유사도 내림차순 상위 `top_k`건을 반환한다."""

    @abstractmethod
    def delete_document(self, document_name: str) -> None:
        """문서의 모든 레코드를 삭제한다."""

    @abstractmethod
    def count(self, document_name: Optional[str] = None) -> int:
        """저장된 레코드 수를 반환한다."""
