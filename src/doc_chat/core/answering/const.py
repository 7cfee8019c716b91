"""
목적: 질의응답 단계의 고정 응답 문구를 정의한다.
설명: 검색 결과가 없을 때의 응답과, 모델이 근거 부족을 알릴 때 쓰는 문구를 제공한다.
디자인 패턴: 상수 모듈
참조: src/doc_chat/core/answering/service.py, src/doc_chat/core/answering/prompts.py
"""

NO_MATCH_ANSWER = "Sorry, I don't know the answer to that question."
UNKNOWN_ANSWER_SENTINEL = "I don't know."
