# core/auth/params.py
"""
core/auth/params.py - 유효 파라미터 해석

CLI에서 받은 오버라이드 값과 기본값(홈 디렉토리 파일 경로)을 합쳐
자격 증명 해석에 사용할 EffectiveParams를 만듭니다.

홈 디렉토리는 호출자(CLI 경계)가 core.config.get_home_dir()로 한 번 구해서
주입합니다. 이 모듈은 환경변수나 파일 시스템을 직접 읽지 않습니다.

검증 규칙:
    - region: 알려진 리전 목록과 대조 (실패 시 RegionParseError)
    - role ARN, 프로파일 이름, 세션 이름: 로컬 검증 없음 (원격 서비스가 검증)

Usage:
    from core.auth.params import resolve_params
    from core.config import get_home_dir

    params = resolve_params(profile="prod", region="eu-west-1", home=get_home_dir())
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from core.auth.types import ConfigurationError
from core.config import settings
from core.region import parse_region


@dataclass(frozen=True)
class EffectiveParams:
    """해석이 끝난 호출 파라미터 (불변)

    Attributes:
        config_file_path: config 파일 경로
        credentials_file_path: credentials 파일 경로
        profile_name: 프로파일 이름 (None이면 기본 Provider 체인 사용)
        role_arn: AssumeRole 대상 역할 ARN 오버라이드
        region: 리전 오버라이드
        session_name: AssumeRole 세션 이름
        mfa_serial: MFA 디바이스 시리얼 (그대로 전달)
        mfa_token_code: MFA 토큰 코드 (그대로 전달)
    """

    config_file_path: str
    credentials_file_path: str
    profile_name: str | None = None
    role_arn: str | None = None
    region: str | None = None
    session_name: str | None = None
    mfa_serial: str | None = None
    mfa_token_code: str | None = None

    def __repr__(self) -> str:
        # MFA 토큰 코드는 출력하지 않음
        return (
            f"EffectiveParams(config_file_path={self.config_file_path!r}, "
            f"credentials_file_path={self.credentials_file_path!r}, "
            f"profile_name={self.profile_name!r}, role_arn={self.role_arn!r}, "
            f"region={self.region!r}, session_name={self.session_name!r}, "
            f"mfa_serial={self.mfa_serial!r})"
        )


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def default_aws_path(home: str | None, file_name: str, config_key: str) -> str:
    """<home>/.aws/<file_name> 경로 계산

    Raises:
        ConfigurationError: 홈 디렉토리를 결정할 수 없는 경우
    """
    if not home:
        raise ConfigurationError(
            f"홈 디렉토리를 결정할 수 없어 기본 {file_name} 파일 경로를 계산할 수 없습니다 "
            "(HOME 미설정)",
            config_key=config_key,
        )
    return os.path.join(home, settings.AWS_DIR_NAME, file_name)


def resolve_params(
    *,
    config_file: str | None = None,
    credentials_file: str | None = None,
    profile: str | None = None,
    role: str | None = None,
    region: str | None = None,
    session_name: str | None = None,
    mfa_serial: str | None = None,
    mfa_token_code: str | None = None,
    home: str | None = None,
) -> EffectiveParams:
    """CLI 오버라이드와 기본값으로 EffectiveParams 생성

    Args:
        config_file: config 파일 경로 (없으면 <home>/.aws/config)
        credentials_file: credentials 파일 경로 (없으면 <home>/.aws/credentials)
        profile: 프로파일 이름
        role: 역할 ARN 오버라이드
        region: 리전 오버라이드
        session_name: AssumeRole 세션 이름
        mfa_serial: MFA 시리얼
        mfa_token_code: MFA 토큰 코드
        home: 홈 디렉토리 (파일 경로 기본값 계산용)

    Raises:
        ConfigurationError: 기본 경로가 필요한데 홈 디렉토리가 없는 경우
        RegionParseError: 알 수 없는 리전
    """
    config_file = _optional(config_file)
    credentials_file = _optional(credentials_file)
    region = _optional(region)

    config_file_path = config_file or default_aws_path(home, settings.CONFIG_FILE_NAME, "config_file")
    credentials_file_path = credentials_file or default_aws_path(
        home, settings.CREDENTIALS_FILE_NAME, "credentials_file"
    )

    return EffectiveParams(
        config_file_path=os.path.expanduser(config_file_path),
        credentials_file_path=os.path.expanduser(credentials_file_path),
        profile_name=_optional(profile),
        role_arn=_optional(role),
        region=parse_region(region) if region else None,
        session_name=_optional(session_name),
        mfa_serial=_optional(mfa_serial),
        mfa_token_code=_optional(mfa_token_code),
    )
