"""
목적: 서버 헬스체크 라우터를 제공한다.
설명: 프로세스 생존 여부만 확인하며 외부 서비스는 호출하지 않는다.
디자인 패턴: 라우터 패턴
참조: src/doc_chat/api/main.py
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="서버 상태를 확인합니다.")
def health() -> dict[str, str]:
    return {"status": "ok"}
