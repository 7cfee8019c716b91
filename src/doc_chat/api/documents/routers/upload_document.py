"""
목적: 문서 업로드 라우터를 제공한다.
설명: 문서를 청킹/임베딩해 벡터 인덱스에 적재하는 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/doc_chat/api/documents/services/runtime.py, src/doc_chat/core/ingestion/service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from doc_chat.api.documents.models import UploadDocumentRequest, UploadDocumentResponse
from doc_chat.api.documents.services import get_api_logger, get_ingestion_service
from doc_chat.core.documents import Document
from doc_chat.core.ingestion import IngestionService
from doc_chat.shared.exceptions import BaseAppException
from doc_chat.shared.logging import LogContext, Logger

router = APIRouter()

UPLOAD_FAILURE_CODE = "UPLOAD_FAILURE"


@router.post(
    "/upload-document",
    response_model=UploadDocumentResponse,
    summary="문서를 업로드해 검색 인덱스에 적재합니다.",
)
def upload_document(
    request: UploadDocumentRequest,
    service: IngestionService = Depends(get_ingestion_service),
    logger: Logger = Depends(get_api_logger),
) -> UploadDocumentResponse:
    """문서를 적재하고 성공 여부를 반환한다."""

    try:
        service.ingest(Document(name=request.name, text=request.text))
    except BaseAppException as error:
        logger.error(
            f"문서 업로드 실패: {error.message}",
            context=LogContext(document_name=request.name),
            metadata=error.to_dict(),
        )
        return UploadDocumentResponse(success=False, code=error.code)
    except Exception as error:
        # 업로드 실패는 상태 코드 대신 응답 본문으로 알린다.
        logger.error(
            f"문서 업로드 실패: {error}",
            context=LogContext(document_name=request.name),
            metadata={"error_type": type(error).__name__},
        )
        return UploadDocumentResponse(success=False, code=UPLOAD_FAILURE_CODE)
    return UploadDocumentResponse(success=True)
