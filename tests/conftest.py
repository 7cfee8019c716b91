"""
목적: 테스트 공용 픽스처를 제공한다.
설명: 호출 기록용 스텁 임베딩, 즉시 재시도 정책, 인메모리 인덱스/클라이언트를 픽스처로 노출한다.
디자인 패턴: 테스트 픽스처
참조: src/doc_chat/integrations/embedding/client.py, src/doc_chat/integrations/db/client.py
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from langchain_core.embeddings import Embeddings

from doc_chat.integrations.db import InMemoryVectorIndex, VectorIndexClient
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.shared.logging import InMemoryLogger
from doc_chat.shared.runtime import RetryPolicy


def _length_vector(text: str) -> list[float]:
    return [float(len(text)), 1.0]


class StubEmbeddings(Embeddings):
    """호출 인자를 기록하는 결정적 임베딩 스텁."""

    def __init__(self, vectorize: Callable[[str], list[float]] = _length_vector) -> None:
        self.vectorize = vectorize
        self.calls: list[list[str]] = []
        self.failures_before_success = 0

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        if self.failures_before_success > 0:
            self.failures_before_success -= 1
            raise ConnectionError("embedding service unavailable")
        return [self.vectorize(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self.embed_documents([text])[0]


@pytest.fixture
def fast_retry() -> RetryPolicy:
    """대기 없이 최대 3회 시도하는 정책."""

    return RetryPolicy(max_attempts=3, initial_backoff=0.0)


@pytest.fixture
def test_logger() -> InMemoryLogger:
    return InMemoryLogger(name="test", emit_stdout=False)


@pytest.fixture
def stub_embeddings_factory() -> type[StubEmbeddings]:
    """벡터 생성 함수를 바꿔 끼울 수 있는 스텁 클래스."""

    return StubEmbeddings


@pytest.fixture
def stub_embeddings() -> StubEmbeddings:
    return StubEmbeddings()


@pytest.fixture
def embedding_client(stub_embeddings, fast_retry, test_logger) -> EmbeddingClient:
    return EmbeddingClient(stub_embeddings, retry_policy=fast_retry, logger=test_logger)


@pytest.fixture
def memory_index() -> InMemoryVectorIndex:
    return InMemoryVectorIndex()


@pytest.fixture
def index_client(memory_index, fast_retry, test_logger) -> VectorIndexClient:
    return VectorIndexClient(memory_index, retry_policy=fast_retry, logger=test_logger)
