"""
목적: 문서 적재 모듈 공개 API를 제공한다.
설명: 적재 서비스와 결과 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/core/ingestion/service.py
"""

from doc_chat.core.ingestion.models import IngestionResult
from doc_chat.core.ingestion.service import IngestionService, ProgressCallback, batched, build_records

__all__ = ["IngestionResult", "IngestionService", "ProgressCallback", "batched", "build_records"]
