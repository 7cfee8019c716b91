"""
목적: LLM 통합 모듈 공개 API를 제공한다.
설명: 로깅/재시도 래퍼 LLM 클라이언트를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/llm/client.py
"""

from doc_chat.integrations.llm.client import LLMClient

__all__ = ["LLMClient"]
