"""
목적: 벡터 인덱스 통합 모듈 공개 API를 제공한다.
설명: 공통 모델, 엔진 인터페이스, 엔진 구현체, 호출 클라이언트를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/db/client.py
"""

from doc_chat.integrations.db.base import (
    BaseVectorIndex,
    QueryMatch,
    VectorMetadata,
    VectorRecord,
    make_record_id,
)
from doc_chat.integrations.db.client import DEFAULT_MAX_BATCH_SIZE, VectorIndexClient
from doc_chat.integrations.db.engines import InMemoryVectorIndex, LanceDBVectorIndex

__all__ = [
    "BaseVectorIndex",
    "QueryMatch",
    "VectorMetadata",
    "VectorRecord",
    "make_record_id",
    "DEFAULT_MAX_BATCH_SIZE",
    "VectorIndexClient",
    "InMemoryVectorIndex",
    "LanceDBVectorIndex",
]
