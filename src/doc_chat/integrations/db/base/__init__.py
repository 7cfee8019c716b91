"""
목적: 벡터 인덱스 베이스 모듈 공개 API를 제공한다.
설명: 공통 모델과 엔진 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/db/base/models.py, src/doc_chat/integrations/db/base/engine.py
"""

from doc_chat.integrations.db.base.engine import BaseVectorIndex
from doc_chat.integrations.db.base.models import (
    RECORD_ID_SEPARATOR,
    QueryMatch,
    VectorMetadata,
    VectorRecord,
    make_record_id,
)

__all__ = [
    "BaseVectorIndex",
    "RECORD_ID_SEPARATOR",
    "QueryMatch",
    "VectorMetadata",
    "VectorRecord",
    "make_record_id",
]
