"""
목적: LanceDB 엔진 모듈을 외부에 노출한다.
설명: LanceDB 엔진과 스키마 어댑터를 제공한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/db/engines/lancedb/engine.py
"""

from doc_chat.integrations.db.engines.lancedb.engine import LanceDBVectorIndex
from doc_chat.integrations.db.engines.lancedb.schema_adapter import LanceSchemaAdapter

__all__ = ["LanceDBVectorIndex", "LanceSchemaAdapter"]
