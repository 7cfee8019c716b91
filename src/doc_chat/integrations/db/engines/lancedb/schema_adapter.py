"""
목적: LanceDB 스키마/행 변환 어댑터를 제공한다.
설명: VectorRecord를 PyArrow 고정 스키마 행으로 바꾸고, 검색 결과 행을 QueryMatch로 복원한다.
디자인 패턴: 어댑터 패턴
참조: src/doc_chat/integrations/db/base/models.py
"""

from __future__ import annotations

from typing import Any, Optional

import pyarrow as pa

from doc_chat.integrations.db.base.models import QueryMatch, VectorMetadata, VectorRecord

ID_COLUMN = "id"
DOCUMENT_NAME_COLUMN = "document_name"
CONTENT_COLUMN = "content"
LOC_COLUMN = "loc"
VECTOR_COLUMN = "vector"


class LanceSchemaAdapter:
    """LanceDB 스키마/행 변환 어댑터."""

    def build_arrow_schema(self, dimension: int) -> pa.Schema:
        if dimension <= 0:
            raise ValueError("벡터 차원 정보가 필요합니다.")
        return pa.schema(
            [
                pa.field(ID_COLUMN, pa.string(), nullable=False),
                pa.field(DOCUMENT_NAME_COLUMN, pa.string(), nullable=False),
                pa.field(CONTENT_COLUMN, pa.string(), nullable=False),
                pa.field(LOC_COLUMN, pa.string(), nullable=True),
                pa.field(VECTOR_COLUMN, pa.list_(pa.float32(), int(dimension)), nullable=False),
            ]
        )

    def record_to_row(self, record: VectorRecord, arrow_schema: pa.Schema) -> dict[str, Any]:
        field = arrow_schema.field(VECTOR_COLUMN)
        if pa.types.is_fixed_size_list(field.type):
            expected = int(field.type.list_size)
            if expected != record.dimension:
                raise ValueError(
                    f"벡터 차원이 일치하지 않습니다. expected={expected}, actual={record.dimension}"
                )
        return {
            ID_COLUMN: record.id,
            DOCUMENT_NAME_COLUMN: record.metadata.document_name,
            CONTENT_COLUMN: record.metadata.content,
            LOC_COLUMN: record.metadata.loc,
            VECTOR_COLUMN: [float(value) for value in record.embedding],
        }

    def row_to_match(
        self,
        row: dict[str, Any],
        include_vector: bool = False,
    ) -> QueryMatch:
        vector: Optional[list[float]] = None
        if include_vector and row.get(VECTOR_COLUMN) is not None:
            vector = [float(value) for value in row[VECTOR_COLUMN]]
        return QueryMatch(
            record_id=str(row[ID_COLUMN]),
            score=self.distance_to_similarity(row.get("_distance")),
            metadata=VectorMetadata(
                document_name=str(row[DOCUMENT_NAME_COLUMN]),
                content=str(row[CONTENT_COLUMN]),
                loc=str(row.get(LOC_COLUMN) or ""),
            ),
            embedding=vector,
        )

    def distance_to_similarity(self, distance: Any) -> float:
        """코사인 거리를 유사도(1 - distance)로 변환한다."""

        if distance is None:
            return 0.0
        return 1.0 - float(distance)

    def build_eq_clause(self, column: str, value: object) -> str:
        return f"{column} = {self._sql_literal(value)}"

    def _sql_literal(self, value: object) -> str:
        text = str(value).replace("'", "''")
        return f"'{text}'"
