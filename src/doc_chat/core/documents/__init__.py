"""
목적: 문서 도메인 모델 공개 API를 제공한다.
설명: 문서/청크/답변 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/core/documents/models.py
"""

from doc_chat.core.documents.models import Answer, Chunk, Document, Source, SourceLocation

__all__ = ["Document", "SourceLocation", "Chunk", "Source", "Answer"]
