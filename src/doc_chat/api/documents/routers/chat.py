"""
목적: 문서 질문 라우터를 제공한다.
설명: 업로드한 문서 범위에서 질문에 답하고 근거 청크를 함께 반환하는 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/doc_chat/api/documents/services/runtime.py, src/doc_chat/core/answering/service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from doc_chat.api.documents.models import ChatRequest, ChatResponse
from doc_chat.api.documents.routers.common import to_http_exception
from doc_chat.api.documents.services import get_answering_service, get_api_logger
from doc_chat.core.answering import AnsweringService
from doc_chat.shared.exceptions import BaseAppException
from doc_chat.shared.logging import LogContext, Logger

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="문서에 대해 질문합니다.",
)
def chat(
    request: ChatRequest,
    service: AnsweringService = Depends(get_answering_service),
    logger: Logger = Depends(get_api_logger),
) -> ChatResponse:
    """질문에 대한 답변과 출처를 반환한다."""

    try:
        answer = service.answer(request.question, request.document_name)
    except BaseAppException as error:
        logger.error(
            f"문서 질문 처리 실패: {error.message}",
            context=LogContext(document_name=request.document_name),
            metadata=error.to_dict(),
        )
        raise to_http_exception(error) from error
    return ChatResponse.from_answer(answer)
