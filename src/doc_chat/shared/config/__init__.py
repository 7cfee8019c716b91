"""
목적: 설정 로더 공개 API를 제공한다.
설명: 일반 설정 병합 로더, 런타임 환경 로더, 파이프라인 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/doc_chat/shared/config/loader.py, src/doc_chat/shared/config/runtime_env_loader.py, src/doc_chat/shared/config/settings.py
"""

from doc_chat.shared.config.loader import ConfigLoader
from doc_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from doc_chat.shared.config.settings import PipelineSettings, load_settings

__all__ = ["ConfigLoader", "RuntimeEnvironmentLoader", "PipelineSettings", "load_settings"]
