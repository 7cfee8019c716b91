"""
목적: 인메모리 벡터 인덱스 엔진을 검증한다.
설명: 업서트 덮어쓰기, 문서 필터 격리, 정렬, 삭제, 건수 조회를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/doc_chat/integrations/db/engines/memory.py
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from doc_chat.integrations.db import InMemoryVectorIndex, VectorMetadata, VectorRecord, make_record_id


def _record(document_name: str, index: int, vector: list[float], content: str = "text") -> VectorRecord:
    return VectorRecord(
        id=make_record_id(document_name, index),
        embedding=vector,
        metadata=VectorMetadata(document_name=document_name, content=content),
    )


def test_query_is_isolated_to_document() -> None:
    index = InMemoryVectorIndex()
    index.upsert(
        [
            _record("doc1", 0, [1.0, 0.0], "cats"),
            _record("doc2", 0, [1.0, 0.0], "dogs"),
            _record("doc1", 1, [0.0, 1.0], "birds"),
        ]
    )

    matches = index.query([1.0, 0.0], top_k=10, document_name="doc1")

    assert [match.record_id for match in matches] == ["doc1_0", "doc1_1"]
    assert all(match.metadata.document_name == "doc1" for match in matches)
    assert matches[0].score == pytest.approx(1.0)
    assert matches[1].score == pytest.approx(0.0)
    assert index.query([1.0, 0.0], top_k=10, document_name="missing") == []


def test_upsert_overwrites_same_id() -> None:
    index = InMemoryVectorIndex()
    index.upsert([_record("doc1", 0, [1.0, 0.0], "old")])
    index.upsert([_record("doc1", 0, [1.0, 0.0], "new")])

    assert index.count() == 1
    assert index.get("doc1_0").metadata.content == "new"


def test_top_k_and_tie_ordering() -> None:
    index = InMemoryVectorIndex()
    index.upsert([_record("doc1", i, [1.0, 0.0]) for i in (2, 0, 1)])

    matches = index.query([1.0, 0.0], top_k=2, document_name="doc1")

    assert [match.record_id for match in matches] == ["doc1_0", "doc1_1"]
    assert all(match.embedding is None for match in matches)


def test_delete_document_and_count() -> None:
    index = InMemoryVectorIndex()
    index.upsert([_record("doc1", 0, [1.0]), _record("doc1", 1, [1.0]), _record("doc2", 0, [1.0])])

    index.delete_document("doc1")

    assert index.count("doc1") == 0
    assert index.count("doc2") == 1
    assert index.count() == 1


def test_record_id_must_carry_document_prefix() -> None:
    with pytest.raises(ValidationError):
        VectorRecord(
            id="other_0",
            embedding=[1.0],
            metadata=VectorMetadata(document_name="doc1", content="text"),
        )
    with pytest.raises(ValidationError):
        VectorRecord(
            id="doc1_0",
            embedding=[],
            metadata=VectorMetadata(document_name="doc1", content="text"),
        )
