"""
목적: 문서 청커 동작을 검증한다.
설명: 원문 보존, 최대 길이, 순번, 위치 정보, 경계 입력을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/doc_chat/core/chunking/splitter.py
"""

from __future__ import annotations

import random

import pytest

from doc_chat.core.chunking import DocumentChunker
from doc_chat.core.documents import SourceLocation
from doc_chat.shared.logging import InMemoryLogger


def _chunker(overlap: int) -> DocumentChunker:
    return DocumentChunker(chunk_overlap=overlap, logger=InMemoryLogger(name="chunk", emit_stdout=False))


def _sample_text() -> str:
    paragraphs = []
    for index in range(30):
        sentences = " ".join(f"Sentence {index}-{n} talks about cats and dogs." for n in range(6))
        paragraphs.append(f"Paragraph {index}\n{sentences}")
    return "\n\n".join(paragraphs)


def test_short_text_is_single_chunk() -> None:
    text = "Cats are mammals.\nDogs are mammals too."

    chunks = _chunker(200).split(text)

    assert len(chunks) == 1
    assert chunks[0].content == text
    assert chunks[0].sequence_index == 0
    assert chunks[0].source_location.line_from == 1
    assert chunks[0].source_location.line_to == 2


def test_zero_overlap_concatenation_equals_input() -> None:
    text = _sample_text()

    chunks = _chunker(0).split(text, max_chunk_size=300)

    assert len(chunks) > 1
    assert "".join(chunk.content for chunk in chunks) == text
    assert all(len(chunk.content) <= 300 for chunk in chunks)
    assert [chunk.sequence_index for chunk in chunks] == list(range(len(chunks)))


def test_overlapping_chunks_cover_input_in_order() -> None:
    text = _sample_text()

    chunks = _chunker(50).split(text, max_chunk_size=300)

    assert all(0 < len(chunk.content) <= 300 for chunk in chunks)
    locations = [chunk.source_location for chunk in chunks]
    assert locations[0].start_index == 0
    assert locations[-1].end_index == len(text)
    for previous, current in zip(locations, locations[1:]):
        assert current.start_index <= previous.end_index
        assert current.start_index > previous.start_index
    for chunk in chunks:
        location = chunk.source_location
        assert text[location.start_index : location.end_index] == chunk.content


def _repeated_token_text() -> str:
    rng = random.Random(20)
    tokens = ["ab", "\n", "\n\n", " ", "ab. ", "cd"]
    return "".join(rng.choice(tokens) for _ in range(600))


@pytest.mark.parametrize(
    ("text", "max_chunk_size", "overlap"),
    [
        ("ab\n\n\n\nab" * 40, 50, 20),
        (_repeated_token_text(), 50, 20),
        (_repeated_token_text(), 12, 5),
    ],
)
def test_repeated_text_locations_have_no_gaps(text: str, max_chunk_size: int, overlap: int) -> None:
    chunks = _chunker(overlap).split(text, max_chunk_size=max_chunk_size)

    locations = [chunk.source_location for chunk in chunks]
    assert len(chunks) > 1
    assert locations[0].start_index == 0
    assert locations[-1].end_index == len(text)
    for previous, current in zip(locations, locations[1:]):
        assert previous.start_index < current.start_index <= previous.end_index
        assert previous.end_index - current.start_index <= overlap
    for chunk in chunks:
        location = chunk.source_location
        assert text[location.start_index : location.end_index] == chunk.content


def test_text_without_separators_is_split_by_characters() -> None:
    text = "x" * 25

    chunks = _chunker(0).split(text, max_chunk_size=10)

    assert [len(chunk.content) for chunk in chunks] == [10, 10, 5]


def test_empty_text_has_no_chunks() -> None:
    assert _chunker(0).split("") == []


def test_whitespace_only_text_is_kept() -> None:
    chunks = _chunker(0).split("   ", max_chunk_size=10)

    assert [chunk.content for chunk in chunks] == ["   "]


@pytest.mark.parametrize(("size", "overlap"), [(0, 0), (100, 100), (100, 150)])
def test_invalid_sizes_are_rejected(size: int, overlap: int) -> None:
    with pytest.raises(ValueError):
        _chunker(overlap).split("text", max_chunk_size=size)


def test_location_serialization() -> None:
    location = SourceLocation(start_index=5, end_index=20, line_from=2, line_to=3)

    raw = location.serialize()

    assert '"lines": {"from": 2, "to": 3}' in raw
    assert SourceLocation.deserialize(raw) == location
