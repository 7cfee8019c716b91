"""
목적: 문서 원문을 크기 제한 청크로 분할한다.
설명: 문단 > 줄 > 문장 > 단어 > 문자 순으로 재귀 분할하고, 청크마다 원문 오프셋/줄 범위를 계산한다.
디자인 패턴: 함수형 변환 모듈
참조: src/doc_chat/core/documents/models.py, src/doc_chat/core/ingestion/service.py
"""

from __future__ import annotations

from typing import Optional

from langchain_text_splitters import RecursiveCharacterTextSplitter

from doc_chat.core.documents.models import Chunk, SourceLocation
from doc_chat.shared.logging import Logger, create_default_logger

DEFAULT_MAX_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class DocumentChunker:
    """재귀 문자 분할기 기반 청커이다.

    구분자를 청크 끝에 남기고 공백을 제거하지 않으므로, 겹침이 0이면
    청크를 순서대로 이어 붙인 결과가 원문과 같다.

    Args:
        chunk_overlap: 인접 청크 간 최대 겹침 문자 수.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        logger: Optional[Logger] = None,
    ) -> None:
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap은 0 이상이어야 합니다.")
        self._chunk_overlap = int(chunk_overlap)
        self._logger = logger or create_default_logger("DocumentChunker")

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    def split(self, text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[Chunk]:
        """원문을 순서가 보장된 청크 목록으로 분할한다."""

        if max_chunk_size < 1:
            raise ValueError("max_chunk_size는 1 이상이어야 합니다.")
        if self._chunk_overlap >= max_chunk_size:
            raise ValueError(
                f"chunk_overlap({self._chunk_overlap})은 max_chunk_size({max_chunk_size})보다 작아야 합니다."
            )
        if not text:
            return []

        splitter = RecursiveCharacterTextSplitter(
            chunk_size=max_chunk_size,
            chunk_overlap=self._chunk_overlap,
            separators=_SEPARATORS,
            keep_separator="end",
            strip_whitespace=False,
            length_function=len,
        )
        pieces = [piece for piece in splitter.split_text(text) if piece]

        starts = _resolve_starts(text, pieces, self._chunk_overlap)
        chunks: list[Chunk] = []
        for sequence_index, (content, start) in enumerate(zip(pieces, starts)):
            chunks.append(
                Chunk(
                    content=content,
                    sequence_index=sequence_index,
                    source_location=_locate(text, start, start + len(content)),
                )
            )

        self._logger.debug(
            f"청킹 완료: 청크 {len(chunks)}개",
            metadata={"text_length": len(text), "max_chunk_size": max_chunk_size},
        )
        return chunks


def _resolve_starts(text: str, pieces: list[str], overlap: int) -> list[int]:
    """청크별 원문 시작 오프셋을 정한다.

    분할기는 첫 청크를 0에서 시작하고, 다음 청크를 직전 청크 끝에서
    최대 `overlap`만큼 앞선 위치에서 시작하며, 마지막 청크를 원문 끝에서 끝낸다.
    같은 문자열이 반복되면 후보가 여럿이므로 앞선 후보부터 놓아 보고,
    뒤 청크를 놓을 수 없으면 되돌아가 다음 후보를 시도한다.
    실패한 (청크 번호, 시작 위치)는 다시 시도하지 않는다.
    """

    if not pieces:
        return []
    starts: list[int] = []
    failed: set[tuple[int, int]] = set()
    cursor = 0
    while True:
        index = len(starts)
        if index == len(pieces):
            if starts[-1] + len(pieces[-1]) == len(text):
                return starts
            position = -1
        else:
            position = _next_candidate(text, pieces, starts, index, overlap, cursor, failed)
        if position >= 0:
            starts.append(position)
            cursor = 0
            continue
        if not starts:
            break
        last = starts.pop()
        failed.add((len(starts), last))
        cursor = last + 1

    # 분할기 규칙을 벗어난 입력이면 순차 탐색 결과를 쓴다.
    fallback: list[int] = []
    search_from = 0
    for content in pieces:
        start = text.find(content, search_from)
        if start < 0:
            start = text.find(content)
        fallback.append(start)
        search_from = max(0, start + len(content) - overlap)
    return fallback


def _next_candidate(
    text: str,
    pieces: list[str],
    starts: list[int],
    index: int,
    overlap: int,
    cursor: int,
    failed: set[tuple[int, int]],
) -> int:
    content = pieces[index]
    if index == 0:
        low, high = 0, 0
    else:
        prev_start = starts[-1]
        prev_end = prev_start + len(pieces[index - 1])
        low, high = max(prev_start + 1, prev_end - overlap), prev_end
    position = text.find(content, max(low, cursor), high + len(content))
    while position >= 0 and (index, position) in failed:
        position = text.find(content, position + 1, high + len(content))
    return position


def _locate(text: str, start: int, end: int) -> SourceLocation:
    return SourceLocation(
        start_index=start,
        end_index=end,
        line_from=text.count("\n", 0, start) + 1,
        line_to=text.count("\n", 0, max(start, end - 1)) + 1,
    )


__all__ = ["DocumentChunker", "DEFAULT_MAX_CHUNK_SIZE", "DEFAULT_CHUNK_OVERLAP"]
