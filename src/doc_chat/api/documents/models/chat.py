"""
목적: 문서 질문 API 모델을 정의한다.
설명: 질문 요청, 답변/출처 응답 모델을 Pydantic으로 제공한다. 필드 이름은 camelCase 별칭으로 직렬화한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/doc_chat/api/documents/routers/chat.py
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from doc_chat.core.documents import Answer


class ChatRequest(BaseModel):
    """문서 질문 요청 모델."""

    model_config = ConfigDict(populate_by_name=True)

    document_name: str = Field(..., min_length=1, alias="documentName")
    question: str = Field(..., min_length=1)


class SourceResponse(BaseModel):
    """답변 출처 응답 모델."""

    model_config = ConfigDict(populate_by_name=True)

    page_content: str = Field(..., alias="pageContent")
    score: float


class ChatResponse(BaseModel):
    """문서 질문 응답 모델."""

    result: str
    sources: List[SourceResponse] = Field(default_factory=list)

    @classmethod
    def from_answer(cls, answer: Answer) -> "ChatResponse":
        return cls(
            result=answer.result,
            sources=[
                SourceResponse(page_content=source.content, score=source.score)
                for source in answer.sources
            ],
        )
