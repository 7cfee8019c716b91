"""
목적: 임베딩 통합 모듈 공개 API를 제공한다.
설명: 임베딩 클라이언트와 줄바꿈 정규화 함수를 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/integrations/embedding/client.py
"""

from doc_chat.integrations.embedding.client import EmbeddingClient, normalize_newlines

__all__ = ["EmbeddingClient", "normalize_newlines"]
