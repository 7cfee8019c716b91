"""
목적: LLM 클라이언트의 로깅/재시도/실패 변환 동작을 검증한다.
설명: 가짜 채팅 모델로 성공 로그, 일시 오류 재시도, CompletionFailure 변환을 확인한다.
디자인 패턴: 프록시 패턴 테스트
참조: src/doc_chat/integrations/llm/client.py
"""

from __future__ import annotations

from typing import Any

import pytest
from langchain_core.language_models import BaseChatModel, FakeListChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult

from doc_chat.integrations.llm import LLMClient
from doc_chat.shared.exceptions import CompletionFailure
from doc_chat.shared.logging import InMemoryLogger
from doc_chat.shared.runtime import RetryPolicy


class FlakyChatModel(BaseChatModel):
    """지정 횟수만큼 실패한 뒤 응답하는 채팅 모델."""

    failures: int = 0
    calls: int = 0

    @property
    def _llm_type(self) -> str:
        return "flaky"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError("provider unavailable")
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content="ok"))])


def _client(model: BaseChatModel, logger: InMemoryLogger) -> LLMClient:
    return LLMClient(
        model=model,
        name="test-llm",
        logger=logger,
        retry_policy=RetryPolicy(max_attempts=3, initial_backoff=0.0),
    )


def test_invoke_logs_success() -> None:
    logger = InMemoryLogger(name="llm-test", emit_stdout=False)
    client = _client(FakeListChatModel(responses=["hello"]), logger)

    response = client.invoke("hi")

    assert response.content == "hello"
    records = logger.repository.list()
    assert any(record.metadata.get("success") is True for record in records)
    assert all(record.metadata.get("model_name") == "test-llm" for record in records)


def test_transient_errors_are_retried() -> None:
    logger = InMemoryLogger(name="llm-test", emit_stdout=False)
    model = FlakyChatModel(failures=2)

    response = _client(model, logger).invoke("hi")

    assert response.content == "ok"
    assert model.calls == 3


def test_exhausted_errors_become_completion_failure() -> None:
    logger = InMemoryLogger(name="llm-test", emit_stdout=False)
    model = FlakyChatModel(failures=10)

    with pytest.raises(CompletionFailure) as info:
        _client(model, logger).invoke("hi")

    assert model.calls == 3
    assert info.value.detail.code == "COMPLETION_FAILURE"
    assert info.value.detail.metadata["attempts"] == 3
    assert any(record.metadata.get("success") is False for record in logger.repository.list())


@pytest.mark.asyncio
async def test_ainvoke_retries_and_maps_failure() -> None:
    logger = InMemoryLogger(name="llm-test", emit_stdout=False)
    recovering = FlakyChatModel(failures=1)

    response = await _client(recovering, logger).ainvoke("hi")
    assert response.content == "ok"
    assert recovering.calls == 2

    failing = FlakyChatModel(failures=10)
    with pytest.raises(CompletionFailure):
        await _client(failing, logger).ainvoke("hi")
    assert failing.calls == 3
