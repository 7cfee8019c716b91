"""
목적: 벡터 인덱스 엔진 구현체를 노출한다.
설명: 인메모리 엔진과 LanceDB 엔진을 제공한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/db/engines/memory.py, src/doc_chat/integrations/db/engines/lancedb/engine.py
"""

from doc_chat.integrations.db.engines.lancedb import LanceDBVectorIndex
from doc_chat.integrations.db.engines.memory import InMemoryVectorIndex, cosine_similarity

__all__ = ["InMemoryVectorIndex", "LanceDBVectorIndex", "cosine_similarity"]
