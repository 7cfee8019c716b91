"""
목적: 헬스체크 라우터 공개 API를 제공한다.
설명: 서버 상태 확인 라우터를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/health/routers/server.py
"""

from doc_chat.api.health.routers.server import router

__all__ = ["router"]
