"""
목적: 문서 API 서비스 공개 API를 제공한다.
설명: 런타임 조립 함수와 FastAPI 주입/종료 함수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/documents/services/runtime.py
"""

from doc_chat.api.documents.services.runtime import (
    DocumentRuntime,
    build_engine,
    build_runtime,
    get_answering_service,
    get_api_logger,
    get_ingestion_service,
    get_runtime,
    shutdown_document_runtime,
)

__all__ = [
    "DocumentRuntime",
    "build_engine",
    "build_runtime",
    "get_runtime",
    "get_ingestion_service",
    "get_answering_service",
    "get_api_logger",
    "shutdown_document_runtime",
]
