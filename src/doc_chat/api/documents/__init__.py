"""
목적: 문서 질의응답 API 패키지를 정의한다.
설명: 문서 업로드/질문 엔드포인트의 모델, 라우터, 서비스 조립 모듈을 포함한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/api/documents/routers/router.py
"""
