"""
목적: RAG 파이프라인 도메인 모델을 정의한다.
설명: 문서, 청크, 원문 위치, 답변/출처 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/doc_chat/core/chunking/splitter.py, src/doc_chat/core/answering/service.py
"""

from __future__ import annotations

import json
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """업로드된 문서 모델이다.

    Args:
        name: 인덱스 내 고유 문서 이름. 검색 필터 키로도 사용한다.
        text: 문서 원문.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    text: str

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("문서 이름은 비어 있을 수 없습니다.")
        return value


class SourceLocation(BaseModel):
    """청크의 원문 위치 정보이다.

    Args:
        start_index: 원문 내 시작 오프셋.
        end_index: 원문 내 종료 오프셋(미포함).
        line_from: 시작 줄 번호(1부터).
        line_to: 종료 줄 번호(포함).
    """

    model_config = ConfigDict(frozen=True)

    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    line_from: int = Field(ge=1)
    line_to: int = Field(ge=1)

    def serialize(self) -> str:
        """메타데이터 저장용 JSON 문자열로 직렬화한다."""

        return json.dumps(
            {
                "lines": {"from": self.line_from, "to": self.line_to},
                "start_index": self.start_index,
                "end_index": self.end_index,
            }
        )

    @classmethod
    def deserialize(cls, raw: str) -> "SourceLocation":
        """`serialize` 결과를 복원한다."""

        payload = json.loads(raw)
        return cls(
            start_index=payload["start_index"],
            end_index=payload["end_index"],
            line_from=payload["lines"]["from"],
            line_to=payload["lines"]["to"],
        )


class Chunk(BaseModel):
    """문서 분할 결과 청크이다."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(min_length=1)
    sequence_index: int = Field(ge=0)
    source_location: SourceLocation


class Source(BaseModel):
    """답변 근거로 인용한 청크이다."""

    content: str
    score: float


class Answer(BaseModel):
    """질의응답 결과이다."""

    result: str
    sources: List[Source] = Field(default_factory=list)


__all__ = ["Document", "SourceLocation", "Chunk", "Source", "Answer"]
