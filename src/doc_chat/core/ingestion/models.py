"""
목적: 문서 적재 결과 모델을 정의한다.
설명: 적재된 문서 이름, 청크 수, 업서트 배치 수, 레코드 ID 목록을 담는다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/doc_chat/core/ingestion/service.py
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class IngestionResult(BaseModel):
    """문서 적재 결과."""

    model_config = ConfigDict(frozen=True)

    document_name: str
    chunk_count: int = Field(ge=0)
    batch_count: int = Field(ge=0)
    record_ids: List[str] = Field(default_factory=list)
