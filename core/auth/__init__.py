# core/auth/__init__.py
"""
AWS 자격 증명 해석 모듈 (core/auth)

프로파일 하나에 대해 CLI 오버라이드, credentials 파일, config 파일을 합쳐
임시 자격 증명을 얻는 체인을 제공합니다.

구성:
- params: CLI 오버라이드 + 기본 경로 → EffectiveParams
- config: config/credentials 파일 파싱 → ParsedConfig
- provider: 정적 자격 증명 Provider, STS 클라이언트
- resolver: 전략 결정(plan)과 실행(execute)
- session: Credential → 환경변수 매핑(materialize)

사용 예시:
    from core.auth import execute, materialize, plan, resolve_params
    from core.config import get_home_dir

    params = resolve_params(profile="prod", region="eu-west-1", home=get_home_dir())
    strategy = plan(params)
    credential = execute(strategy)
    env = materialize(credential, strategy.region)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Types
    "StrategyKind",
    "Credential",
    "AuthError",
    "ConfigurationError",
    "RegionParseError",
    "CredentialsError",
    "ProviderError",
    "EmptyResponseError",
    # Config
    "Loader",
    "AWSProfile",
    "ParsedConfig",
    "load_config",
    "list_profiles",
    # Params
    "EffectiveParams",
    "resolve_params",
    # Providers
    "StaticCredentialsProvider",
    "StsClient",
    # Resolver
    "StaticStrategy",
    "SessionTokenStrategy",
    "AssumeRoleStrategy",
    "plan",
    "execute",
    "resolve",
    # Session
    "materialize",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Types
    "StrategyKind": (".types", "StrategyKind"),
    "Credential": (".types", "Credential"),
    "AuthError": (".types", "AuthError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    "RegionParseError": (".types", "RegionParseError"),
    "CredentialsError": (".types", "CredentialsError"),
    "ProviderError": (".types", "ProviderError"),
    "EmptyResponseError": (".types", "EmptyResponseError"),
    # Config
    "Loader": (".config", "Loader"),
    "AWSProfile": (".config", "AWSProfile"),
    "ParsedConfig": (".config", "ParsedConfig"),
    "load_config": (".config", "load_config"),
    "list_profiles": (".config", "list_profiles"),
    # Params
    "EffectiveParams": (".params", "EffectiveParams"),
    "resolve_params": (".params", "resolve_params"),
    # Providers
    "StaticCredentialsProvider": (".provider", "StaticCredentialsProvider"),
    "StsClient": (".provider", "StsClient"),
    # Resolver
    "StaticStrategy": (".resolver", "StaticStrategy"),
    "SessionTokenStrategy": (".resolver", "SessionTokenStrategy"),
    "AssumeRoleStrategy": (".resolver", "AssumeRoleStrategy"),
    "plan": (".resolver", "plan"),
    "execute": (".resolver", "execute"),
    "resolve": (".resolver", "resolve"),
    # Session
    "materialize": (".session", "materialize"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드

    CLI 시작 시간 최적화를 위해 무거운 의존성(boto3 등)을
    실제 필요한 시점에만 로드합니다.
    """
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
