"""
목적: 문서 적재(ingestion) 오케스트레이터를 제공한다.
설명: 청킹 > 일괄 임베딩 > 레코드 구성 > 배치 업서트 순서로 문서를 벡터 인덱스에 적재한다.
디자인 패턴: 서비스 레이어 + 의존성 주입
참조: src/doc_chat/core/chunking/splitter.py, src/doc_chat/integrations/embedding/client.py, src/doc_chat/integrations/db/client.py
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Optional, TypeVar

from doc_chat.core.chunking import DEFAULT_MAX_CHUNK_SIZE, DocumentChunker
from doc_chat.core.documents import Chunk, Document
from doc_chat.core.ingestion.models import IngestionResult
from doc_chat.integrations.db import (
    DEFAULT_MAX_BATCH_SIZE,
    VectorIndexClient,
    VectorMetadata,
    VectorRecord,
    make_record_id,
)
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.shared.exceptions import EmbeddingFailure
from doc_chat.shared.logging import LogContext, Logger, create_default_logger

T = TypeVar("T")

ProgressCallback = Callable[[int, int], None]


def batched(items: Sequence[T], batch_size: int = DEFAULT_MAX_BATCH_SIZE) -> Iterator[list[T]]:
    """시퀀스를 배치 단위로 분할한다. 빈 시퀀스는 배치를 만들지 않는다."""

    safe_batch_size = max(1, int(batch_size))
    for index in range(0, len(items), safe_batch_size):
        yield list(items[index : index + safe_batch_size])


def build_records(
    document_name: str,
    chunks: Sequence[Chunk],
    embeddings: Sequence[Sequence[float]],
) -> list[VectorRecord]:
    """청크와 임베딩을 같은 순번끼리 묶어 벡터 레코드를 만든다."""

    if len(chunks) != len(embeddings):
        raise EmbeddingFailure.from_cause(
            f"청크와 임베딩 개수가 일치하지 않습니다. chunks={len(chunks)}, embeddings={len(embeddings)}",
            document_name=document_name,
        )
    return [
        VectorRecord(
            id=make_record_id(document_name, chunk.sequence_index),
            embedding=list(embedding),
            metadata=VectorMetadata(
                document_name=document_name,
                content=chunk.content,
                loc=chunk.source_location.serialize(),
            ),
        )
        for chunk, embedding in zip(chunks, embeddings)
    ]


class IngestionService:
    """문서 적재 서비스.

    임베딩이 모두 끝난 뒤에 업서트를 시작하며, 배치는 청크 순서대로 하나씩 반영한다.
    중간 실패 시 이미 반영된 배치는 되돌리지 않는다. 레코드 ID가 결정적이므로
    같은 문서를 다시 적재하면 덮어쓰기로 복구된다.

    Args:
        chunker: 문서 청커.
        embedding_client: 임베딩 클라이언트.
        index_client: 벡터 인덱스 클라이언트.
        chunk_size: 청크 최대 길이(문자 수).
        batch_size: 업서트 배치 크기.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        chunker: DocumentChunker,
        embedding_client: EmbeddingClient,
        index_client: VectorIndexClient,
        chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
        batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        logger: Optional[Logger] = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size는 1 이상이어야 합니다.")
        if batch_size > index_client.max_batch_size:
            raise ValueError(
                f"batch_size({batch_size})는 인덱스 최대 배치 크기({index_client.max_batch_size})를 넘을 수 없습니다."
            )
        self._chunker = chunker
        self._embedding_client = embedding_client
        self._index_client = index_client
        self._chunk_size = chunk_size
        self._batch_size = batch_size
        self._logger = logger or create_default_logger("IngestionService")

    def ingest(
        self,
        document: Document,
        on_progress: Optional[ProgressCallback] = None,
    ) -> IngestionResult:
        """문서를 청킹/임베딩해 인덱스에 적재한다.

        Raises:
            EmbeddingFailure: 임베딩 호출이 실패한 경우.
            IndexWriteFailure: 업서트가 실패한 경우.
        """

        context = LogContext(document_name=document.name)
        chunks = self._chunker.split(document.text, max_chunk_size=self._chunk_size)
        total = len(chunks)
        self._logger.info(f"문서 적재 시작: 청크 {total}개", context=context)

        if not chunks:
            self._logger.info("적재할 청크가 없습니다.", context=context)
            return IngestionResult(document_name=document.name, chunk_count=0, batch_count=0)

        embeddings = self._embedding_client.embed_batch([chunk.content for chunk in chunks])
        records = build_records(document.name, chunks, embeddings)

        total_batches = (total + self._batch_size - 1) // self._batch_size
        done = 0
        batch_count = 0
        for batch in batched(records, batch_size=self._batch_size):
            self._index_client.upsert(batch)
            batch_count += 1
            for _ in batch:
                done += 1
                if on_progress is not None:
                    on_progress(done, total)
            self._logger.info(
                f"배치 업서트 완료: {batch_count}/{total_batches} (batch_size={len(batch)})",
                context=context,
            )

        self._logger.info(
            f"문서 적재 완료: 레코드 {total}개, 배치 {batch_count}개",
            context=context,
        )
        return IngestionResult(
            document_name=document.name,
            chunk_count=total,
            batch_count=batch_count,
            record_ids=[record.id for record in records],
        )

    def reingest(
        self,
        document: Document,
        on_progress: Optional[ProgressCallback] = None,
    ) -> IngestionResult:
        """기존 레코드를 모두 삭제한 뒤 문서를 다시 적재한다."""

        self._index_client.delete_document(document.name)
        self._logger.info(
            "기존 문서 레코드를 삭제했습니다.",
            context=LogContext(document_name=document.name),
        )
        return self.ingest(document, on_progress=on_progress)


__all__ = ["IngestionService", "ProgressCallback", "batched", "build_records"]
