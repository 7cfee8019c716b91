"""
목적: LanceDB 기반 벡터 인덱스 엔진을 제공한다.
설명: 단일 테이블에 청크 레코드를 저장하고, 문서 이름 사전 필터와 코사인 거리로 검색한다.
디자인 패턴: 어댑터 패턴
참조: src/doc_chat/integrations/db/base/engine.py, src/doc_chat/integrations/db/engines/lancedb/schema_adapter.py
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import lancedb

from doc_chat.integrations.db.base.engine import BaseVectorIndex
from doc_chat.integrations.db.base.models import QueryMatch, VectorRecord
from doc_chat.integrations.db.engines.lancedb.schema_adapter import (
    DOCUMENT_NAME_COLUMN,
    ID_COLUMN,
    VECTOR_COLUMN,
    LanceSchemaAdapter,
)
from doc_chat.shared.logging import Logger, create_default_logger


class LanceDBVectorIndex(BaseVectorIndex):
    """LanceDB 기반 엔진 구현체.

    테이블은 첫 업서트 시점에 임베딩 차원으로 생성된다.
    """

    def __init__(
        self,
        uri: str = "data/db/vector",
        table_name: str = "documents",
        logger: Optional[Logger] = None,
    ) -> None:
        self._uri = uri
        self._table_name = table_name
        self._logger = logger or create_default_logger("LanceDBVectorIndex")
        self._db: Any | None = None
        self._schema_adapter = LanceSchemaAdapter()

    @property
    def name(self) -> str:
        return "lancedb"

    @property
    def table_name(self) -> str:
        return self._table_name

    def connect(self) -> None:
        if self._db is not None:
            return
        self._db = lancedb.connect(self._uri)
        self._logger.info(f"LanceDB 연결이 초기화되었습니다: uri={self._uri}")

    def close(self) -> None:
        # LanceDB 파이썬 클라이언트는 명시적 close를 제공하지 않는다.
        self._db = None

    def upsert(self, records: Sequence[VectorRecord]) -> None:
        if not records:
            return
        table = self._ensure_table(records[0].dimension)
        rows = [self._schema_adapter.record_to_row(record, table.schema) for record in records]
        (
            table.merge_insert(ID_COLUMN)
            .when_matched_update_all()
            .when_not_matched_insert_all()
            .execute(rows)
        )

    def query(
        self,
        vector: Sequence[float],
        top_k: int,
        document_name: str,
        include_vectors: bool = False,
    ) -> List[QueryMatch]:
        if top_k <= 0:
            return []
        table = self._open_table_or_none()
        if table is None:
            return []

        where_clause = self._schema_adapter.build_eq_clause(DOCUMENT_NAME_COLUMN, document_name)
        rows = (
            table.search([float(value) for value in vector], vector_column_name=VECTOR_COLUMN)
            .metric("cosine")
            .where(where_clause, prefilter=True)
            .limit(top_k)
            .to_arrow()
            .to_pylist()
        )
        matches = [
            self._schema_adapter.row_to_match(row, include_vector=include_vectors)
            for row in rows
        ]
        matches.sort(key=lambda item: (-item.score, item.record_id))
        return matches[:top_k]

    def delete_document(self, document_name: str) -> None:
        table = self._open_table_or_none()
        if table is None:
            return
        table.delete(self._schema_adapter.build_eq_clause(DOCUMENT_NAME_COLUMN, document_name))

    def count(self, document_name: Optional[str] = None) -> int:
        table = self._open_table_or_none()
        if table is None:
            return 0
        if document_name is None:
            return int(table.count_rows())
        return int(
            table.count_rows(
                self._schema_adapter.build_eq_clause(DOCUMENT_NAME_COLUMN, document_name)
            )
        )

    def _ensure_db(self):
        if self._db is None:
            self.connect()
        if self._db is None:
            raise RuntimeError("LanceDB 연결이 초기화되지 않았습니다.")
        return self._db

    def _table_names(self) -> list[str]:
        db = self._ensure_db()
        lister = getattr(db, "list_tables", None)
        result = lister() if lister is not None else db.table_names()
        if isinstance(result, list):
            return [str(name) for name in result]
        tables = getattr(result, "tables", None)
        if isinstance(tables, list):
            return [str(name) for name in tables]
        return []

    def _open_table_or_none(self):
        if self._table_name not in self._table_names():
            return None
        return self._ensure_db().open_table(self._table_name)

    def _ensure_table(self, dimension: int):
        table = self._open_table_or_none()
        if table is not None:
            return table
        arrow_schema = self._schema_adapter.build_arrow_schema(dimension)
        self._logger.info(
            f"LanceDB 테이블을 생성합니다: table={self._table_name}, dimension={dimension}"
        )
        return self._ensure_db().create_table(
            self._table_name,
            schema=arrow_schema,
            exist_ok=True,
        )


__all__ = ["LanceDBVectorIndex", "VECTOR_COLUMN"]
