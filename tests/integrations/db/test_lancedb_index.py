"""
목적: LanceDB 벡터 인덱스 엔진을 검증한다.
설명: 임시 경로 DB에서 업서트 덮어쓰기, 문서 필터 검색, 유사도 변환, 삭제, 건수 조회를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/doc_chat/integrations/db/engines/lancedb/engine.py
"""

from __future__ import annotations

import pytest

from doc_chat.integrations.db import (
    LanceDBVectorIndex,
    VectorIndexClient,
    VectorMetadata,
    VectorRecord,
    make_record_id,
)
from doc_chat.shared.exceptions import IndexWriteFailure
from doc_chat.shared.logging import InMemoryLogger


def _record(document_name: str, index: int, vector: list[float], content: str) -> VectorRecord:
    return VectorRecord(
        id=make_record_id(document_name, index),
        embedding=vector,
        metadata=VectorMetadata(document_name=document_name, content=content, loc='{"lines": {}}'),
    )


def _engine(tmp_path) -> LanceDBVectorIndex:
    return LanceDBVectorIndex(
        uri=str(tmp_path / "lancedb"),
        table_name="documents",
        logger=InMemoryLogger(name="lancedb-test", emit_stdout=False),
    )


def test_query_before_any_write_is_empty(tmp_path) -> None:
    engine = _engine(tmp_path)

    assert engine.query([0.1, 0.2, 0.3], top_k=5, document_name="doc1") == []
    assert engine.count() == 0


def test_upsert_query_and_filter(tmp_path) -> None:
    engine = _engine(tmp_path)
    engine.upsert(
        [
            _record("doc1", 0, [0.1, 0.2, 0.3], "고양이 문서"),
            _record("doc1", 1, [0.9, 0.1, 0.0], "강아지 문서"),
            _record("doc2", 0, [0.1, 0.2, 0.3], "다른 문서"),
        ]
    )

    matches = engine.query([0.1, 0.2, 0.3], top_k=5, document_name="doc1")

    assert [match.record_id for match in matches] == ["doc1_0", "doc1_1"]
    assert matches[0].score == pytest.approx(1.0, abs=1e-4)
    assert matches[0].score > matches[1].score
    assert matches[0].metadata.content == "고양이 문서"
    assert matches[0].embedding is None


def test_upsert_overwrites_and_delete(tmp_path) -> None:
    engine = _engine(tmp_path)
    engine.upsert([_record("doc1", 0, [1.0, 0.0, 0.0], "old")])
    engine.upsert([_record("doc1", 0, [1.0, 0.0, 0.0], "new"), _record("o'brien", 0, [0.0, 1.0, 0.0], "quoted")])

    assert engine.count() == 2
    assert engine.query([1.0, 0.0, 0.0], top_k=1, document_name="doc1")[0].metadata.content == "new"
    assert engine.count("o'brien") == 1

    engine.delete_document("doc1")

    assert engine.count("doc1") == 0
    assert engine.count() == 1


def test_dimension_mismatch_is_write_failure(tmp_path) -> None:
    client = VectorIndexClient(_engine(tmp_path), logger=InMemoryLogger(name="lancedb-test", emit_stdout=False))
    client.upsert([_record("doc1", 0, [1.0, 0.0, 0.0], "three")])

    with pytest.raises(IndexWriteFailure):
        client.upsert([_record("doc1", 1, [1.0, 0.0], "two")])
