"""
목적: RAG 파이프라인 설정 모델을 제공한다.
설명: ConfigLoader로 수집한 환경 변수를 Pydantic 모델로 검증해 청킹/검색/모델/재시도/인덱스 설정을 노출한다.
디자인 패턴: 설정 객체
참조: src/doc_chat/shared/config/loader.py, src/doc_chat/api/documents/services/runtime.py
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from doc_chat.shared.config.loader import ConfigLoader
from doc_chat.shared.runtime import RetryPolicy


class PipelineSettings(BaseModel):
    """파이프라인 설정 모델이다.

    환경 변수 `DOC_CHAT_<FIELD>`(대문자)로 각 필드를 덮어쓸 수 있다.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    chunk_size: int = Field(default=1000, ge=1)
    chunk_overlap: int = Field(default=200, ge=0)
    batch_size: int = Field(default=100, ge=1)
    top_k: int = Field(default=10, ge=1)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)

    embedding_model: str = "text-embedding-3-small"
    chat_model: str = "gpt-4o-mini"
    request_timeout_seconds: float = Field(default=60.0, gt=0)

    retry_max_attempts: int = Field(default=3, ge=1)
    retry_initial_backoff: float = Field(default=0.5, ge=0)
    retry_max_backoff: float = Field(default=8.0, ge=0)

    index_backend: Literal["lancedb", "memory"] = "lancedb"
    lancedb_uri: str = "data/db/vector"
    lancedb_table: str = "documents"

    @model_validator(mode="after")
    def _check_overlap(self) -> "PipelineSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap은 chunk_size보다 작아야 합니다.")
        return self

    def retry_policy(self) -> RetryPolicy:
        """설정 기반 재시도 정책을 생성한다."""

        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            initial_backoff=self.retry_initial_backoff,
            max_backoff=self.retry_max_backoff,
        )


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> PipelineSettings:
    """환경 변수와 오버라이드를 병합해 설정을 생성한다."""

    raw = ConfigLoader().add_env().build(overrides)
    return PipelineSettings.model_validate(raw)


__all__ = ["PipelineSettings", "load_settings"]
