"""
목적: 문서 API 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 HTTP 예외로 변환하는 헬퍼를 제공한다.
디자인 패턴: 유틸리티 모듈
참조: src/doc_chat/api/documents/routers/router.py
"""

from __future__ import annotations

from fastapi import HTTPException, status

from doc_chat.shared.exceptions import BaseAppException, PipelineFailure


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다.

    외부 연동 실패는 502로, 그 외는 500으로 응답한다. 원인 문자열은 응답에 넣지 않는다.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(error, PipelineFailure):
        status_code = status.HTTP_502_BAD_GATEWAY
    return HTTPException(
        status_code=status_code,
        detail={"message": error.message, "code": error.code},
    )
