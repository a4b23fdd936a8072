"""
core/config.py - 중앙 설정 관리

애플리케이션 전체에서 사용되는 상수와 환경변수 헬퍼를 정의합니다.

Usage:
    from core.config import settings, get_home_dir

    region = settings.DEFAULT_REGION  # "us-east-1"
    home = get_home_dir()             # "/home/user" 또는 None
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DISTRIBUTION_NAME = "stsenv"


@dataclass(frozen=True)
class Settings:
    """불변 애플리케이션 설정

    Attributes:
        DEFAULT_REGION: 리전이 어디에도 지정되지 않았을 때 사용하는 리전
        DEFAULT_SESSION_NAME: AssumeRole 호출 시 기본 RoleSessionName
        DEFAULT_PROFILE: source_profile이 없을 때 STS 호출자 자격 증명 프로파일
        AWS_DIR_NAME: 홈 디렉토리 하위 AWS 설정 디렉토리 이름
        CONFIG_FILE_NAME: config 파일 이름
        CREDENTIALS_FILE_NAME: credentials 파일 이름
    """

    DEFAULT_REGION: str = "us-east-1"
    DEFAULT_SESSION_NAME: str = "stsenv"
    DEFAULT_PROFILE: str = "default"

    AWS_DIR_NAME: str = ".aws"
    CONFIG_FILE_NAME: str = "config"
    CREDENTIALS_FILE_NAME: str = "credentials"

    # CLI 옵션 기본값으로 사용하는 AWS CLI 호환 환경변수
    ENV_CONFIG_FILE: str = "AWS_CONFIG_FILE"
    ENV_CREDENTIALS_FILE: str = "AWS_SHARED_CREDENTIALS_FILE"
    ENV_PROFILE: str = "AWS_PROFILE"
    ENV_LOG_LEVEL: str = "STSENV_LOG_LEVEL"


settings = Settings()


@dataclass(frozen=True)
class LogConfig:
    """로깅 설정

    stdout은 셸 출력 전용이므로 로그는 항상 stderr로 나갑니다.
    """

    level: int = logging.WARNING
    format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls, debug: bool = False, environ: Mapping[str, str] | None = None) -> LogConfig:
        """환경변수(STSENV_LOG_LEVEL)와 --debug 플래그로 LogConfig 생성

        --debug가 지정되면 환경변수보다 우선합니다.
        알 수 없는 레벨 이름은 무시하고 WARNING을 사용합니다.
        """
        if debug:
            return cls(level=logging.DEBUG)

        env = os.environ if environ is None else environ
        level_name = env.get(settings.ENV_LOG_LEVEL, "").strip().upper()
        level = logging.getLevelName(level_name) if level_name else logging.WARNING
        if not isinstance(level, int):
            level = logging.WARNING
        return cls(level=level)


def get_home_dir(environ: Mapping[str, str] | None = None) -> str | None:
    """홈 디렉토리 경로 반환

    HOME, USERPROFILE(Windows) 순서로 확인합니다.
    CLI 경계에서 한 번만 호출하고 결과를 resolve_params()에 주입합니다.

    Returns:
        홈 디렉토리 경로 또는 None (결정할 수 없는 경우)
    """
    env = os.environ if environ is None else environ
    for name in ("HOME", "USERPROFILE"):
        value = env.get(name)
        if value:
            return value
    return None


def get_version() -> str:
    """설치된 배포판 버전 반환 (미설치 상태면 "0.0.0")"""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"
