"""
목적: 임베딩 클라이언트 동작을 검증한다.
설명: 줄바꿈 정규화, 입력 순서 보존, 단건/배치 일치, 재시도, 실패 예외 변환을 확인한다.
디자인 패턴: 프록시 패턴 테스트
참조: src/doc_chat/integrations/embedding/client.py
"""

from __future__ import annotations

import pytest

from doc_chat.integrations.embedding import EmbeddingClient, normalize_newlines
from doc_chat.shared.exceptions import EmbeddingFailure
from doc_chat.shared.logging import LogLevel


def test_normalize_newlines() -> None:
    assert normalize_newlines("a\nb\r\nc\rd") == "a b c d"


def test_batch_is_normalized_and_ordered(embedding_client, stub_embeddings) -> None:
    vectors = embedding_client.embed_batch(["one\ntwo", "three"])

    assert stub_embeddings.calls == [["one two", "three"]]
    assert vectors == [[7.0, 1.0], [5.0, 1.0]]


def test_embed_one_matches_batch_of_one(embedding_client) -> None:
    assert embedding_client.embed_one("hello\nworld") == embedding_client.embed_batch(["hello world"])[0]


def test_empty_batch_skips_service(embedding_client, stub_embeddings) -> None:
    assert embedding_client.embed_batch([]) == []
    assert stub_embeddings.calls == []


def test_transient_failure_is_retried(embedding_client, stub_embeddings, test_logger) -> None:
    stub_embeddings.failures_before_success = 2

    vectors = embedding_client.embed_batch(["text"])

    assert vectors == [[4.0, 1.0]]
    assert len(stub_embeddings.calls) == 3
    warnings = [record for record in test_logger.repository.list() if record.level == LogLevel.WARNING]
    assert len(warnings) == 2


def test_exhausted_retries_raise_embedding_failure(embedding_client, stub_embeddings) -> None:
    stub_embeddings.failures_before_success = 10

    with pytest.raises(EmbeddingFailure) as info:
        embedding_client.embed_batch(["text"])

    assert info.value.detail.code == "EMBEDDING_FAILURE"
    assert info.value.detail.metadata["attempts"] == 3
    assert isinstance(info.value.original, ConnectionError)


def test_malformed_response_raises(stub_embeddings, fast_retry, test_logger) -> None:
    stub_embeddings.vectorize = lambda text: []
    client = EmbeddingClient(stub_embeddings, retry_policy=fast_retry, logger=test_logger)

    with pytest.raises(EmbeddingFailure):
        client.embed_batch(["text"])
