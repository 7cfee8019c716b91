"""
목적: 공통 상수 집합을 제공한다.
설명: 프로젝트 전역에서 사용하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/doc_chat/shared/config/loader.py, src/doc_chat/shared/config/settings.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        ENV_PREFIX: 파이프라인 설정 환경 변수 접두사.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    ENV_PREFIX = "DOC_CHAT_"


__all__ = ["SharedConst"]
