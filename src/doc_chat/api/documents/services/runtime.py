"""
목적: 문서 API 런타임 조립 인스턴스를 제공한다.
설명: 설정을 읽어 임베딩/인덱스/LLM 클라이언트와 적재/질의응답 서비스를 조립하고 FastAPI 주입 함수로 노출한다.
디자인 패턴: 모듈 조립 + 지연 싱글턴
참조: src/doc_chat/shared/config/settings.py, src/doc_chat/core/ingestion/service.py, src/doc_chat/core/answering/service.py
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from langchain_openai import ChatOpenAI, OpenAIEmbeddings

from doc_chat.core.answering import AnsweringService
from doc_chat.core.chunking import DocumentChunker
from doc_chat.core.ingestion import IngestionService
from doc_chat.integrations.db import (
    BaseVectorIndex,
    InMemoryVectorIndex,
    LanceDBVectorIndex,
    VectorIndexClient,
)
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.integrations.llm import LLMClient
from doc_chat.shared.config import PipelineSettings, load_settings
from doc_chat.shared.logging import Logger, create_default_logger

# API 요청 처리 로깅
api_logger: Logger = create_default_logger("DocumentAPI")


@dataclass(frozen=True)
class DocumentRuntime:
    """프로세스 단위로 공유하는 조립 결과."""

    settings: PipelineSettings
    engine: BaseVectorIndex
    ingestion_service: IngestionService
    answering_service: AnsweringService


def build_engine(settings: PipelineSettings) -> BaseVectorIndex:
    """설정된 백엔드의 인덱스 엔진을 생성한다."""

    if settings.index_backend == "memory":
        return InMemoryVectorIndex()
    return LanceDBVectorIndex(
        uri=settings.lancedb_uri,
        table_name=settings.lancedb_table,
        logger=create_default_logger("LanceDBVectorIndex"),
    )


def build_runtime(
    settings: Optional[PipelineSettings] = None,
    engine: Optional[BaseVectorIndex] = None,
) -> DocumentRuntime:
    """설정 기반으로 서비스 그래프 전체를 조립한다.

    공급자 SDK 자체 재시도는 끄고(`max_retries=0`) 재시도 정책을 한 곳에서 적용한다.
    """

    resolved = settings or load_settings()
    retry_policy = resolved.retry_policy()
    resolved_engine = engine or build_engine(resolved)

    embeddings = OpenAIEmbeddings(
        model=resolved.embedding_model,
        timeout=resolved.request_timeout_seconds,
        max_retries=0,
    )
    chat_model = ChatOpenAI(
        model=resolved.chat_model,
        temperature=resolved.temperature,
        timeout=resolved.request_timeout_seconds,
        max_retries=0,
    )

    embedding_client = EmbeddingClient(
        embeddings,
        retry_policy=retry_policy,
        logger=create_default_logger("EmbeddingClient"),
    )
    index_client = VectorIndexClient(
        resolved_engine,
        max_batch_size=resolved.batch_size,
        retry_policy=retry_policy,
        logger=create_default_logger("VectorIndexClient"),
    )
    llm_client = LLMClient(
        model=chat_model,
        name="document-qa-llm",
        retry_policy=retry_policy,
    )

    ingestion_service = IngestionService(
        chunker=DocumentChunker(chunk_overlap=resolved.chunk_overlap),
        embedding_client=embedding_client,
        index_client=index_client,
        chunk_size=resolved.chunk_size,
        batch_size=resolved.batch_size,
    )
    answering_service = AnsweringService(
        embedding_client=embedding_client,
        index_client=index_client,
        llm=llm_client,
        top_k=resolved.top_k,
    )
    return DocumentRuntime(
        settings=resolved,
        engine=resolved_engine,
        ingestion_service=ingestion_service,
        answering_service=answering_service,
    )


_runtime: Optional[DocumentRuntime] = None
_runtime_lock = threading.RLock()


def get_runtime() -> DocumentRuntime:
    """런타임 싱글턴을 반환한다. 첫 요청 시점에 조립한다."""

    global _runtime
    if _runtime is not None:
        return _runtime
    with _runtime_lock:
        if _runtime is None:
            _runtime = build_runtime()
            api_logger.info(
                f"문서 API 런타임 조립 완료: index_backend={_runtime.settings.index_backend}"
            )
    return _runtime


# FastAPI 주입/수명주기 함수
#
# 사용 위치:
# - get_ingestion_service(): src/doc_chat/api/documents/routers/upload_document.py
# - get_answering_service(): src/doc_chat/api/documents/routers/chat.py
# - shutdown_document_runtime(): src/doc_chat/api/main.py (lifespan 종료 구간)


def get_ingestion_service() -> IngestionService:
    """FastAPI Depends 경유로 IngestionService 싱글턴을 반환한다."""

    return get_runtime().ingestion_service


def get_answering_service() -> AnsweringService:
    """FastAPI Depends 경유로 AnsweringService 싱글턴을 반환한다."""

    return get_runtime().answering_service


def get_api_logger() -> Logger:
    return api_logger


def shutdown_document_runtime() -> None:
    """앱 종료 시 인덱스 엔진 연결을 정리한다."""

    global _runtime
    with _runtime_lock:
        if _runtime is None:
            return
        _runtime.engine.close()
        _runtime = None


__all__ = [
    "DocumentRuntime",
    "api_logger",
    "build_engine",
    "build_runtime",
    "get_runtime",
    "get_ingestion_service",
    "get_answering_service",
    "get_api_logger",
    "shutdown_document_runtime",
]
