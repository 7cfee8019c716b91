"""
목적: 헬스체크 API 패키지를 정의한다.
설명: 서버 상태 확인 라우터를 포함한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/health/routers/server.py
"""
