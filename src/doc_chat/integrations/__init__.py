"""
목적: integrations 패키지의 공개 API를 제공한다.
설명: 임베딩/벡터 인덱스/LLM 통합 모듈을 한 번에 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/db, src/doc_chat/integrations/embedding, src/doc_chat/integrations/llm
"""

from doc_chat.integrations.db import (
    BaseVectorIndex,
    InMemoryVectorIndex,
    LanceDBVectorIndex,
    VectorIndexClient,
)
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.integrations.llm import LLMClient

__all__ = [
    "BaseVectorIndex",
    "InMemoryVectorIndex",
    "LanceDBVectorIndex",
    "VectorIndexClient",
    "EmbeddingClient",
    "LLMClient",
]
