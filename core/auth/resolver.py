# core/auth/resolver.py
"""
core/auth/resolver.py - 자격 증명 해석 엔진

EffectiveParams와 config 파일의 프로파일 메타데이터만으로 획득 전략을 한 번 결정하고
(plan), 결정된 전략을 실행하여 정규화된 Credential을 만듭니다 (execute).

전략 결정:
    1. credentials 파일 기반 Provider를 만들고 프로파일이 지정되면 해당 섹션으로 좁힘
    2. config 파일이 존재하고 + 프로파일이 지정되고 + config에 그 프로파일이 있으면
       → 역할/세션 분기, 아니면 → 정적 분기
    3. 역할/세션 분기:
       - 리전: --region → 프로파일 region → [default] region → 기본 리전
       - 호출자 자격 증명: source_profile (없으면 "default") credentials 섹션
       - role ARN(--role 우선)이 있으면 AssumeRole, 없으면 GetSessionToken
    4. 정적 분기: Provider 체인에서 바로 자격 증명 획득 (STS 호출 없음)

source_profile은 한 단계만 따라갑니다. source_profile의 config 항목에 role_arn이
있더라도 그 프로파일의 정적 키만 사용하며 역할 체인을 재귀적으로 따라가지 않습니다.

Usage:
    from core.auth.params import resolve_params
    from core.auth.resolver import execute, plan

    params = resolve_params(profile="prod", home=get_home_dir())
    strategy = plan(params)
    credential = execute(strategy)
    region = strategy.region
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Union

from core.auth.config.loader import AWSProfile, ParsedConfig, load_config
from core.auth.params import EffectiveParams
from core.auth.provider.static import StaticCredentialsProvider
from core.auth.provider.sts import StsClient
from core.auth.types import Credential, StrategyKind
from core.config import settings

logger = logging.getLogger(__name__)

StsClientFactory = Callable[[Credential, str], StsClient]

_PLAN_LOG = "전략: %s (profile=%s, source=%s, region=%s)"


# =============================================================================
# Strategies
# =============================================================================


@dataclass(frozen=True)
class StaticStrategy:
    """정적 분기: Provider 체인의 키를 그대로 사용

    Attributes:
        provider: credentials Provider (프로파일 지정 시 해당 섹션)
        region: --region 값만 사용 (프로파일/기본 리전 폴백 없음)
    """

    kind: ClassVar[StrategyKind] = StrategyKind.STATIC

    provider: StaticCredentialsProvider
    region: str | None = None

    def acquire(self, sts_factory: StsClientFactory) -> Credential:
        return self.provider.load()


@dataclass(frozen=True)
class SessionTokenStrategy:
    """세션 토큰 분기: GetSessionToken

    Attributes:
        provider: STS 호출자 자격 증명 Provider
        region: STS 호출 및 출력에 사용할 리전
        mfa_serial: MFA 시리얼
        mfa_token_code: MFA 토큰 코드
    """

    kind: ClassVar[StrategyKind] = StrategyKind.SESSION_TOKEN

    provider: StaticCredentialsProvider
    region: str
    mfa_serial: str | None = None
    mfa_token_code: str | None = None

    def acquire(self, sts_factory: StsClientFactory) -> Credential:
        client = sts_factory(self.provider.load(), self.region)
        return client.get_session_token(mfa_serial=self.mfa_serial, mfa_token_code=self.mfa_token_code)


@dataclass(frozen=True)
class AssumeRoleStrategy:
    """역할 전환 분기: AssumeRole

    Attributes:
        provider: STS 호출자 자격 증명 Provider
        region: STS 호출 및 출력에 사용할 리전
        role_arn: 대상 역할 ARN
        session_name: RoleSessionName
        mfa_serial: MFA 시리얼
        mfa_token_code: MFA 토큰 코드
    """

    kind: ClassVar[StrategyKind] = StrategyKind.ASSUME_ROLE

    provider: StaticCredentialsProvider
    region: str
    role_arn: str
    session_name: str
    mfa_serial: str | None = None
    mfa_token_code: str | None = None

    def acquire(self, sts_factory: StsClientFactory) -> Credential:
        client = sts_factory(self.provider.load(), self.region)
        return client.assume_role(
            self.role_arn,
            self.session_name,
            mfa_serial=self.mfa_serial,
            mfa_token_code=self.mfa_token_code,
        )


ResolutionStrategy = Union[StaticStrategy, SessionTokenStrategy, AssumeRoleStrategy]


# =============================================================================
# Decision
# =============================================================================


def effective_region(
    params_region: str | None,
    profile: AWSProfile | None,
    parsed: ParsedConfig | None,
) -> str:
    """역할/세션 분기의 리전 결정 (먼저 존재하는 값 사용)

    --region → 프로파일 region → [default] region → settings.DEFAULT_REGION
    """
    if params_region:
        return params_region
    if profile is not None and profile.region:
        return profile.region
    if parsed is not None and parsed.default_region:
        return parsed.default_region
    return settings.DEFAULT_REGION


def plan(
    params: EffectiveParams,
    config_loader: Callable[[str], ParsedConfig | None] = load_config,
) -> ResolutionStrategy:
    """획득 전략 결정

    Args:
        params: 유효 파라미터
        config_loader: config 파일 로더 (파일이 없으면 None 반환)

    Returns:
        StaticStrategy | SessionTokenStrategy | AssumeRoleStrategy

    Raises:
        ConfigurationError: config 파일 파싱 실패 또는 알 수 없는 리전
    """
    base_provider = StaticCredentialsProvider(params.credentials_file_path, params.profile_name)

    profile = None
    parsed = None
    if params.profile_name:
        parsed = config_loader(params.config_file_path)
        if parsed is not None:
            profile = parsed.profiles.get(params.profile_name)

    if profile is None:
        if params.role_arn:
            logger.debug("config 프로파일이 없어 --role 값을 사용하지 않습니다: %s", params.role_arn)
        logger.debug("전략: %s (profile=%s)", StrategyKind.STATIC, params.profile_name)
        return StaticStrategy(provider=base_provider, region=params.region)

    region = effective_region(params.region, profile, parsed)
    caller_profile = profile.source_profile or settings.DEFAULT_PROFILE
    _warn_nested_role_chain(profile, parsed)
    caller_provider = base_provider.narrow(caller_profile)

    role_arn = params.role_arn or profile.role_arn
    if role_arn:
        logger.debug(_PLAN_LOG, StrategyKind.ASSUME_ROLE, profile.name, caller_profile, region)
        return AssumeRoleStrategy(
            provider=caller_provider,
            region=region,
            role_arn=role_arn,
            session_name=params.session_name or settings.DEFAULT_SESSION_NAME,
            mfa_serial=params.mfa_serial,
            mfa_token_code=params.mfa_token_code,
        )

    logger.debug(_PLAN_LOG, StrategyKind.SESSION_TOKEN, profile.name, caller_profile, region)
    return SessionTokenStrategy(
        provider=caller_provider,
        region=region,
        mfa_serial=params.mfa_serial,
        mfa_token_code=params.mfa_token_code,
    )


def _warn_nested_role_chain(profile: AWSProfile, parsed: ParsedConfig | None) -> None:
    """source_profile 자체가 role_arn을 가진 경우 경고 (역할 체인은 따라가지 않음)

    에러로 거부하지 않고 경고만 남긴 뒤 source_profile의 정적 키로 계속 진행합니다.
    """
    if not profile.source_profile or parsed is None:
        return
    source = parsed.profiles.get(profile.source_profile)
    if source is not None and source.role_arn:
        logger.warning(
            "프로파일 '%s'의 source_profile '%s'에 role_arn이 있지만 역할 체인은 지원하지 않습니다. "
            "'%s'의 정적 키만 사용합니다.",
            profile.name,
            source.name,
            source.name,
        )


# =============================================================================
# Execution
# =============================================================================


def execute(strategy: ResolutionStrategy, sts_factory: StsClientFactory = StsClient) -> Credential:
    """결정된 전략 실행

    Raises:
        CredentialsError: 호출자/정적 자격 증명 로드 실패
        ProviderError: STS 호출 실패
        EmptyResponseError: STS 응답에 자격 증명이 없음
    """
    return strategy.acquire(sts_factory)


def resolve(
    params: EffectiveParams,
    config_loader: Callable[[str], ParsedConfig | None] = load_config,
    sts_factory: StsClientFactory = StsClient,
) -> Credential:
    """전략 결정과 실행을 한 번에 수행"""
    return execute(plan(params, config_loader), sts_factory)
