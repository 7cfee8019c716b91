"""
목적: 벡터 인덱스 통합 인터페이스에서 공통으로 사용하는 모델을 정의한다.
설명: 저장 단위(VectorRecord), 고정 메타데이터 스키마, 유사도 검색 결과(QueryMatch)를 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/doc_chat/integrations/db/base/engine.py
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

RECORD_ID_SEPARATOR = "_"


def make_record_id(document_name: str, sequence_index: int) -> str:
    """문서 이름과 청크 순번으로 결정적 레코드 ID를 만든다."""

    return f"{document_name}{RECORD_ID_SEPARATOR}{sequence_index}"


class VectorMetadata(BaseModel):
    """벡터 레코드 메타데이터이다.

    Args:
        document_name: 문서 이름(검색 필터 키).
        content: 청크 원문.
        loc: 직렬화된 원문 위치 정보.
    """

    model_config = ConfigDict(frozen=True)

    document_name: str = Field(min_length=1)
    content: str = Field(min_length=1)
    loc: str = ""


class VectorRecord(BaseModel):
    """벡터 인덱스 저장 단위이다."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    embedding: List[float] = Field(min_length=1)
    metadata: VectorMetadata

    @model_validator(mode="after")
    def _check_namespace(self) -> "VectorRecord":
        prefix = f"{self.metadata.document_name}{RECORD_ID_SEPARATOR}"
        if not self.id.startswith(prefix):
            raise ValueError(f"레코드 ID는 문서 이름 접두사를 가져야 합니다: id={self.id}, prefix={prefix}")
        return self

    @property
    def dimension(self) -> int:
        return len(self.embedding)


class QueryMatch(BaseModel):
    """유사도 검색 결과 항목이다. score가 클수록 유사하다."""

    record_id: str
    score: float
    metadata: VectorMetadata
    embedding: Optional[List[float]] = None


__all__ = [
    "RECORD_ID_SEPARATOR",
    "make_record_id",
    "VectorMetadata",
    "VectorRecord",
    "QueryMatch",
]
