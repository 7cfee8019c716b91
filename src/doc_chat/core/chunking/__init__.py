"""
목적: 청킹 모듈 공개 API를 제공한다.
설명: 문서 청커와 기본 크기 상수를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/core/chunking/splitter.py
"""

from doc_chat.core.chunking.splitter import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_MAX_CHUNK_SIZE,
    DocumentChunker,
)

__all__ = ["DocumentChunker", "DEFAULT_MAX_CHUNK_SIZE", "DEFAULT_CHUNK_OVERLAP"]
