"""
목적: 검색 증강 질의응답 서비스를 검증한다.
설명: 검색 결과 없음 단락, 모름 응답 시 출처 생략, 컨텍스트 결합, 출처 순서, 실패 전파를 확인한다.
디자인 패턴: 서비스 레이어 테스트
참조: src/doc_chat/core/answering/service.py
"""

from __future__ import annotations

import math
from typing import Any

import pytest
from langchain_core.language_models import BaseChatModel, FakeListChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult

from doc_chat.core.answering import NO_MATCH_ANSWER, UNKNOWN_ANSWER_SENTINEL, AnsweringService
from doc_chat.core.chunking import DocumentChunker
from doc_chat.core.documents import Document
from doc_chat.core.ingestion import IngestionService
from doc_chat.integrations.db import VectorMetadata, VectorRecord, make_record_id
from doc_chat.integrations.embedding import EmbeddingClient
from doc_chat.integrations.llm import LLMClient
from doc_chat.shared.exceptions import CompletionFailure, IndexQueryFailure


class PromptRecordingChatModel(BaseChatModel):
    """받은 프롬프트를 기록하고 고정 응답을 돌려주는 채팅 모델."""

    reply: Any = "answer"
    prompts: list[str] = []
    fail: bool = False

    @property
    def _llm_type(self) -> str:
        return "prompt-recording"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.prompts.append(str(messages[-1].content))
        if self.fail:
            raise ConnectionError("completion service down")
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=self.reply))])


def _seed(index_client, document_name: str, contents: list[str], vectors: list[list[float]]) -> None:
    index_client.upsert(
        [
            VectorRecord(
                id=make_record_id(document_name, i),
                embedding=vector,
                metadata=VectorMetadata(document_name=document_name, content=content),
            )
            for i, (content, vector) in enumerate(zip(contents, vectors))
        ]
    )


def _service(embedding_client, index_client, llm, test_logger, top_k: int = 10) -> AnsweringService:
    return AnsweringService(
        embedding_client=embedding_client,
        index_client=index_client,
        llm=llm,
        top_k=top_k,
        logger=test_logger,
    )


def test_zero_matches_skip_completion(embedding_client, index_client, test_logger) -> None:
    llm = FakeListChatModel(responses=["should not be used"])

    answer = _service(embedding_client, index_client, llm, test_logger).answer("What?", "missing")

    assert answer.result == NO_MATCH_ANSWER
    assert answer.sources == []
    assert llm.i == 0


def test_sentinel_answer_drops_sources(embedding_client, index_client, test_logger) -> None:
    _seed(index_client, "doc1", ["unrelated"], [[1.0, 1.0]])
    llm = FakeListChatModel(responses=[f"  {UNKNOWN_ANSWER_SENTINEL}\n"])

    answer = _service(embedding_client, index_client, llm, test_logger).answer("What?", "doc1")

    assert answer.result == UNKNOWN_ANSWER_SENTINEL
    assert answer.sources == []


def test_context_is_joined_in_score_order(embedding_client, index_client, test_logger) -> None:
    # 질문 벡터([5.0, 1.0])와 가까운 순서: B > A > C
    _seed(index_client, "doc1", ["A.", "B.", "C."], [[1.0, 1.0], [5.0, 1.0], [0.0, 1.0]])
    _seed(index_client, "doc2", ["other"], [[5.0, 1.0]])
    llm = PromptRecordingChatModel(reply="It is B.", prompts=[])

    answer = _service(embedding_client, index_client, llm, test_logger).answer("Why?!", "doc1")

    assert answer.result == "It is B."
    assert [source.content for source in answer.sources] == ["B.", "A.", "C."]
    assert answer.sources[0].score >= answer.sources[1].score >= answer.sources[2].score
    prompt = llm.prompts[0]
    assert "<context>B.A.C.</context>" in prompt
    assert "<question>Why?!</question>" in prompt
    assert UNKNOWN_ANSWER_SENTINEL in prompt
    assert "other" not in prompt


def test_top_k_limits_sources(embedding_client, index_client, test_logger) -> None:
    _seed(index_client, "doc1", [f"c{i}" for i in range(12)], [[float(i + 1), 1.0] for i in range(12)])
    llm = FakeListChatModel(responses=["fine"])

    answer = _service(embedding_client, index_client, llm, test_logger, top_k=10).answer("q", "doc1")

    assert len(answer.sources) == 10


def test_list_content_reply_is_joined(embedding_client, index_client, test_logger) -> None:
    _seed(index_client, "doc1", ["ctx"], [[1.0, 1.0]])
    llm = PromptRecordingChatModel(reply=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}], prompts=[])

    answer = _service(embedding_client, index_client, llm, test_logger).answer("q", "doc1")

    assert answer.result == "Part one. Part two."


def test_completion_failure_propagates(embedding_client, index_client, fast_retry, test_logger) -> None:
    _seed(index_client, "doc1", ["ctx"], [[1.0, 1.0]])
    model = PromptRecordingChatModel(fail=True, prompts=[])
    llm = LLMClient(model=model, logger=test_logger, retry_policy=fast_retry)

    with pytest.raises(CompletionFailure):
        _service(embedding_client, index_client, llm, test_logger).answer("q", "doc1")
    assert len(model.prompts) == 3


def test_query_failure_propagates(embedding_client, test_logger, fast_retry) -> None:
    class BrokenIndexClient:
        def query(self, vector, top_k, document_name):
            raise IndexQueryFailure.from_cause("offline")

    llm = FakeListChatModel(responses=["unused"])
    service = AnsweringService(
        embedding_client=embedding_client,
        index_client=BrokenIndexClient(),
        llm=llm,
        logger=test_logger,
    )

    with pytest.raises(IndexQueryFailure):
        service.answer("q", "doc1")
    assert llm.i == 0


def test_upload_then_ask_end_to_end(index_client, stub_embeddings_factory, fast_retry, test_logger) -> None:
    # 질문과 청크의 코사인 유사도가 0.9가 되도록 벡터를 고정한다.
    question = "What are cats?"
    text = "Cats are mammals.\nDogs are mammals too."
    embeddings = stub_embeddings_factory(
        vectorize=lambda value: [0.9, math.sqrt(1 - 0.81)] if value == question else [1.0, 0.0]
    )
    embedding_client = EmbeddingClient(embeddings, retry_policy=fast_retry, logger=test_logger)
    IngestionService(
        chunker=DocumentChunker(logger=test_logger),
        embedding_client=embedding_client,
        index_client=index_client,
        logger=test_logger,
    ).ingest(Document(name="doc1", text=text))
    llm = FakeListChatModel(responses=["Cats are mammals."])

    answer = _service(embedding_client, index_client, llm, test_logger).answer(question, "doc1")

    assert answer.result == "Cats are mammals."
    assert len(answer.sources) == 1
    assert answer.sources[0].content == text
    assert answer.sources[0].score == pytest.approx(0.9)
