"""
목적: doc_chat 패키지 루트를 정의한다.
설명: 문서 업로드/질의응답 RAG 서비스의 최상위 패키지이다.
디자인 패턴: 패키지 루트
참조: src/doc_chat/api, src/doc_chat/core, src/doc_chat/integrations, src/doc_chat/shared
"""

__version__ = "0.1.0"
