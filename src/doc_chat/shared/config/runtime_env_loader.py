"""
목적: 런타임 환경별 `.env` 로딩을 제공한다.
설명: 기본 `.env`를 로드한 뒤 `ENV` 값을 기준으로 local/dev/stg/prod 환경 파일을 선택해 로드한다.
디자인 패턴: 전략 패턴
참조: src/doc_chat/shared/config/settings.py, src/doc_chat/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from doc_chat.shared.logging import Logger, create_default_logger


class RuntimeEnvironmentLoader:
    """런타임 환경별 `.env` 로더이다.

    동작 순서:
    1. 프로젝트 루트의 `.env`를 로드한다(없으면 경고 후 건너뜀).
    2. `ENV`(또는 `APP_ENV`) 값으로 런타임 환경을 결정한다. 비어 있으면 `local`.
    3. `dev/stg/prod`이면 `src/doc_chat/resources/<env>/.env`를 추가로 로드한다.
    """

    _SUPPORTED_ENVS = {"local", "dev", "stg", "prod"}
    _ENV_ALIASES = {
        "development": "dev",
        "staging": "stg",
        "production": "prod",
    }
    _ENV_KEYS = ("ENV", "APP_ENV")

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        resources_root: Optional[Path] = None,
    ) -> None:
        module_path = Path(__file__).resolve()
        self._project_root = Path(project_root or module_path.parents[4])
        self._resources_root = Path(resources_root or module_path.parents[2] / "resources")
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")

    @property
    def project_root(self) -> Path:
        """프로젝트 루트 경로를 반환한다."""

        return self._project_root

    def load(self, override_root_env: bool = False) -> str:
        """런타임 환경을 판별하고 관련 `.env`를 로드한다.

        Returns:
            판별된 런타임 환경 문자열(`local/dev/stg/prod`).
        """

        root_env = self._project_root / ".env"
        if root_env.exists():
            load_dotenv(dotenv_path=root_env, override=override_root_env)
        else:
            self._logger.warning(f"프로젝트 루트 .env 파일이 없어 건너뜁니다: {root_env}")

        runtime_env = self._resolve_runtime_env()
        os.environ["ENV"] = runtime_env
        if runtime_env == "local":
            self._logger.info(f"런타임 환경 로드 완료: env={runtime_env}")
            return runtime_env

        env_file = self._resources_root / runtime_env / ".env"
        if not env_file.exists():
            raise FileNotFoundError(f"환경 파일을 찾을 수 없습니다: {env_file}")
        load_dotenv(dotenv_path=env_file, override=False)
        self._logger.info(f"런타임 환경 로드 완료: env={runtime_env}, resource={env_file}")
        return runtime_env

    def _resolve_runtime_env(self) -> str:
        raw_value = next(
            (os.getenv(key) for key in self._ENV_KEYS if (os.getenv(key) or "").strip()),
            None,
        )
        if raw_value is None:
            return "local"
        normalized = raw_value.strip().lower()
        normalized = self._ENV_ALIASES.get(normalized, normalized)
        if normalized not in self._SUPPORTED_ENVS:
            supported_values = ", ".join(sorted(self._SUPPORTED_ENVS))
            raise ValueError(
                f"지원하지 않는 ENV 값입니다: {raw_value}. 허용값: {supported_values}"
            )
        return normalized


__all__ = ["RuntimeEnvironmentLoader"]
