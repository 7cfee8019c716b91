"""
목적: 문서 질의응답(stuff) 프롬프트를 정의한다.
설명: 검색된 청크를 하나의 컨텍스트로 넣고 질문에 답하게 하는 textwrap + PromptTemplate 모듈 싱글턴이다.
디자인 패턴: 모듈 싱글턴
참조: src/doc_chat/core/answering/service.py
"""

from __future__ import annotations

import textwrap

from langchain_core.prompts import PromptTemplate

from doc_chat.core.answering.const import UNKNOWN_ANSWER_SENTINEL

_STUFF_QA_PROMPT = textwrap.dedent(
"""
You answer questions about a single uploaded document.

<instructions>
Use only the text inside <context> to answer the question in <question>.
  1. Do not use outside knowledge.
  2. If the context does not contain the answer, reply with exactly: {sentinel}
  3. Do not add anything else to that reply.
  4. Otherwise answer directly and concisely.
</instructions>

<context>{context}</context>
<question>{question}</question>
"""
).strip()

STUFF_QA_PROMPT = PromptTemplate.from_template(_STUFF_QA_PROMPT).partial(
    sentinel=UNKNOWN_ANSWER_SENTINEL,
)
