"""
목적: 검색 증강 질의응답 오케스트레이터를 제공한다.
설명: 질문 임베딩 > 문서 범위 검색 > 컨텍스트 결합 > 모델 응답 > 출처 결정 순서로 답변을 만든다.
디자인 패턴: 서비스 레이어 + 의존성 주입
참조: src/doc_chat/core/answering/prompts.py, src/doc_chat/integrations/llm/client.py
"""

from __future__ import annotations

import time
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.prompts import PromptTemplate

from doc_chat.core.answering.const import NO_MATCH_ANSWER, UNKNOWN_ANSWER_SENTINEL
from doc_chat.core.answering.prompts import STUFF_QA_PROMPT
from doc_chat.core.documents import Answer, Source
from doc_chat.integrations.db import QueryMatch, VectorIndexClient
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.shared.exceptions import CompletionFailure
from doc_chat.shared.logging import LogContext, Logger, create_default_logger

DEFAULT_TOP_K = 10


class AnsweringService:
    """문서 질의응답 서비스.

    Args:
        embedding_client: 질문 임베딩 클라이언트.
        index_client: 벡터 인덱스 클라이언트.
        llm: 응답 생성 모델. 운영에서는 `LLMClient`를 주입한다.
        top_k: 검색 건수.
        prompt: 응답 생성 프롬프트.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        index_client: VectorIndexClient,
        llm: BaseChatModel,
        top_k: int = DEFAULT_TOP_K,
        prompt: PromptTemplate = STUFF_QA_PROMPT,
        logger: Optional[Logger] = None,
    ) -> None:
        if top_k < 1:
            raise ValueError("top_k는 1 이상이어야 합니다.")
        self._embedding_client = embedding_client
        self._index_client = index_client
        self._llm = llm
        self._top_k = top_k
        self._prompt = prompt
        self._logger = logger or create_default_logger("AnsweringService")

    def answer(self, question: str, document_name: str) -> Answer:
        """문서 범위에서 질문에 답한다.

        Raises:
            EmbeddingFailure: 질문 임베딩이 실패한 경우.
            IndexQueryFailure: 검색이 실패한 경우.
            CompletionFailure: 응답 생성이 실패한 경우.
        """

        context = LogContext(document_name=document_name)
        vector = self._embedding_client.embed_one(question)
        matches = self._index_client.query(vector, self._top_k, document_name)
        self._logger.info(f"검색 완료: {len(matches)}건", context=context)

        if not matches:
            self._logger.info("검색 결과가 없어 기본 응답을 반환합니다.", context=context)
            return Answer(result=NO_MATCH_ANSWER, sources=[])

        result = self._complete(question, matches)
        if result == UNKNOWN_ANSWER_SENTINEL:
            self._logger.info("모델이 답을 찾지 못해 출처를 생략합니다.", context=context)
            return Answer(result=result, sources=[])

        return Answer(
            result=result,
            sources=[
                Source(content=match.metadata.content, score=match.score)
                for match in matches
            ],
        )

    def _complete(self, question: str, matches: list[QueryMatch]) -> str:
        # 청크는 검색 순서 그대로 구분자 없이 이어 붙인다.
        joined_context = "".join(match.metadata.content for match in matches)
        prompt_text = self._prompt.format(context=joined_context, question=question)

        start = time.monotonic()
        response = self._llm.invoke(prompt_text)
        text = _extract_text(response).strip()
        self._logger.debug(
            "응답 생성 완료",
            metadata={"duration_ms": int((time.monotonic() - start) * 1000)},
        )
        if not text:
            raise CompletionFailure.from_cause("모델 응답이 비어 있습니다.")
        return text


def _extract_text(message: object) -> str:
    content: Any = message.content if isinstance(message, BaseMessage) else message
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, dict) and item.get("text") is not None:
                parts.append(str(item["text"]))
        return "".join(parts)
    return str(content)


__all__ = ["AnsweringService", "DEFAULT_TOP_K"]
