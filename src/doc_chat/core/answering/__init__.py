"""
목적: 질의응답 모듈 공개 API를 제공한다.
설명: 질의응답 서비스, 프롬프트, 고정 응답 문구를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/core/answering/service.py
"""

from doc_chat.core.answering.const import NO_MATCH_ANSWER, UNKNOWN_ANSWER_SENTINEL
from doc_chat.core.answering.prompts import STUFF_QA_PROMPT
from doc_chat.core.answering.service import DEFAULT_TOP_K, AnsweringService

__all__ = [
    "AnsweringService",
    "DEFAULT_TOP_K",
    "NO_MATCH_ANSWER",
    "UNKNOWN_ANSWER_SENTINEL",
    "STUFF_QA_PROMPT",
]
