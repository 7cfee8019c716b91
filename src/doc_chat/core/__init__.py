"""
목적: core 패키지의 공개 API를 제공한다.
설명: 문서 모델, 청킹, 적재, 질의응답 모듈을 한 번에 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/core/ingestion, src/doc_chat/core/answering
"""

from doc_chat.core.answering import AnsweringService
from doc_chat.core.chunking import DocumentChunker
from doc_chat.core.documents import Answer, Chunk, Document, Source, SourceLocation
from doc_chat.core.ingestion import IngestionResult, IngestionService

__all__ = [
    "AnsweringService",
    "DocumentChunker",
    "Answer",
    "Chunk",
    "Document",
    "Source",
    "SourceLocation",
    "IngestionResult",
    "IngestionService",
]
