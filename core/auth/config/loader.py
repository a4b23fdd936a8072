# core/auth/config/loader.py
"""
AWS 설정 파일 로더

~/.aws/config 및 ~/.aws/credentials 파일을 파싱하여 프로파일 정보를 제공합니다.

섹션 이름 규칙:
    - [default]          → 프로파일로 등록하지 않음 (region만 default_region으로 사용)
    - [profile <name>]   → 프로파일 <name> (config 파일 규칙)
    - [<name>]           → 프로파일 <name> (credentials 파일 규칙)

두 규칙은 같은 파서가 함께 처리하므로 config/credentials 어느 파일이든
동일한 ParsedConfig 형태로 읽을 수 있습니다.

Usage:
    from core.auth.config import load_config, list_profiles

    config = load_config("~/.aws/config")
    profile = config.profiles.get("prod")

    for name in list_profiles(credentials_path, config_path):
        print(name)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from botocore.configloader import raw_config_parse
from botocore.exceptions import ConfigNotFound, ConfigParseError

from core.auth.types import ConfigurationError
from core.config import settings
from core.region import parse_region

logger = logging.getLogger(__name__)

PROFILE_PREFIX = "profile "
DEFAULT_SECTION = "default"


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class AWSProfile:
    """AWS 프로파일 설정

    Attributes:
        name: 프로파일 이름 ("profile " 접두사 제외)
        role_arn: AssumeRole 대상 역할 ARN
        source_profile: STS 호출자 자격 증명으로 사용할 credentials 프로파일
        region: 프로파일 리전
    """

    name: str
    role_arn: str | None = None
    source_profile: str | None = None
    region: str | None = None


@dataclass
class ParsedConfig:
    """파싱된 설정 파일 전체

    Attributes:
        default_region: [default] 섹션의 region
        profiles: {프로파일 이름: AWSProfile} (파일 순서 유지)
        config_path: 읽은 파일 경로
    """

    default_region: str | None = None
    profiles: dict[str, AWSProfile] = field(default_factory=dict)
    config_path: str | None = None


# =============================================================================
# Parsing helpers
# =============================================================================


def profile_name_from_section(section_name: str) -> str | None:
    """섹션 이름에서 프로파일 이름 추출

    Returns:
        프로파일 이름, [default] 섹션이면 None
    """
    if section_name.startswith(PROFILE_PREFIX):
        return section_name[len(PROFILE_PREFIX) :]
    if section_name != DEFAULT_SECTION:
        return section_name
    return None


def _get_str(section: dict[str, Any], key: str) -> str | None:
    """섹션에서 문자열 값 조회 (빈 값이나 중첩 값은 None)"""
    value = section.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _get_region(section: dict[str, Any]) -> str | None:
    region_name = _get_str(section, "region")
    if region_name is None:
        return None
    return parse_region(region_name)


def _read_sections(path: str | os.PathLike[str]) -> dict[str, dict[str, Any]]:
    """INI 파일을 {섹션 이름: {키: 값}} 형태로 읽음 (섹션 순서 유지)

    Raises:
        ConfigNotFound: 파일이 없는 경우
        ConfigurationError: 파일을 열 수 없거나 파싱 실패 시
    """
    # configparser.read()는 열기 실패(OSError)를 조용히 건너뛰므로 먼저 확인
    if os.path.isfile(path):
        try:
            with open(path, "rb"):
                pass
        except OSError as e:
            raise ConfigurationError(f"설정 파일을 열 수 없습니다: {path}", cause=e) from e

    try:
        return raw_config_parse(str(path))
    except ConfigParseError as e:
        raise ConfigurationError(f"설정 파일 파싱 실패: {path}", cause=e) from e


def parse_config_file(path: str | os.PathLike[str]) -> ParsedConfig:
    """설정 파일을 파싱하여 ParsedConfig 반환

    Args:
        path: config 또는 credentials 파일 경로

    Raises:
        ConfigNotFound: 파일이 없는 경우
        ConfigurationError: 파싱 실패 또는 알 수 없는 리전
    """
    sections = _read_sections(path)

    default_region = None
    if DEFAULT_SECTION in sections:
        default_region = _get_region(sections[DEFAULT_SECTION])

    profiles: dict[str, AWSProfile] = {}
    for section_name, section in sections.items():
        profile_name = profile_name_from_section(section_name)
        if profile_name is None:
            continue

        profiles[profile_name] = AWSProfile(
            name=profile_name,
            role_arn=_get_str(section, "role_arn"),
            source_profile=_get_str(section, "source_profile"),
            region=_get_region(section),
        )

    logger.debug("설정 파일 로드: %s (프로파일 %d개)", path, len(profiles))
    return ParsedConfig(default_region=default_region, profiles=profiles, config_path=str(path))


# =============================================================================
# Loader
# =============================================================================


class Loader:
    """AWS 설정 파일 로더

    경로를 지정하지 않으면 홈 디렉토리의 ~/.aws/config, ~/.aws/credentials를 사용합니다.
    홈 디렉토리는 기본 경로가 필요할 때만 조회합니다.

    Attributes:
        config_path: config 파일 경로
        credentials_path: credentials 파일 경로
    """

    def __init__(
        self,
        config_path: str | os.PathLike[str] | None = None,
        credentials_path: str | os.PathLike[str] | None = None,
    ):
        self.config_path = self._resolve_path(config_path, settings.CONFIG_FILE_NAME, "config_file")
        self.credentials_path = self._resolve_path(
            credentials_path, settings.CREDENTIALS_FILE_NAME, "credentials_file"
        )

    @staticmethod
    def _resolve_path(path: str | os.PathLike[str] | None, file_name: str, config_key: str) -> Path:
        if path:
            return Path(path)

        from core.auth.params import default_aws_path
        from core.config import get_home_dir

        return Path(default_aws_path(get_home_dir(), file_name, config_key))

    def load_config(self) -> ParsedConfig | None:
        """config 파일 로드 (파일이 없으면 None)"""
        return self._load_optional(self.config_path)

    def load_credentials(self) -> ParsedConfig | None:
        """credentials 파일 로드 (파일이 없으면 None)"""
        return self._load_optional(self.credentials_path)

    def list_profiles(self) -> list[str]:
        """credentials 파일, config 파일 순서로 프로파일 이름 나열

        같은 이름이 두 파일에 모두 있으면 두 번 나옵니다.
        """
        names: list[str] = []
        for parsed in (self.load_credentials(), self.load_config()):
            if parsed is not None:
                names.extend(parsed.profiles)
        return names

    @staticmethod
    def _load_optional(path: Path) -> ParsedConfig | None:
        try:
            return parse_config_file(path)
        except ConfigNotFound:
            logger.debug("설정 파일 없음: %s", path)
            return None


# =============================================================================
# 모듈 레벨 편의 함수
# =============================================================================


def load_config(path: str | os.PathLike[str]) -> ParsedConfig | None:
    """config 파일 로드

    Returns:
        ParsedConfig, 파일이 없으면 None

    Raises:
        ConfigurationError: 파싱 실패 또는 알 수 없는 리전
    """
    return Loader._load_optional(Path(path))


def list_profiles(
    credentials_path: str | os.PathLike[str],
    config_path: str | os.PathLike[str],
) -> list[str]:
    """credentials, config 파일의 프로파일 이름 목록 (중복 제거 없음)"""
    return Loader(config_path=config_path, credentials_path=credentials_path).list_profiles()
