# core/auth/types/__init__.py
"""
자격 증명 해석 모듈의 공통 타입 정의

이 모듈은 Credential 값 타입, 전략 열거형과 에러 클래스를 정의합니다.

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Enums
    "StrategyKind",
    # Data classes
    "Credential",
    # Errors
    "AuthError",
    "ConfigurationError",
    "RegionParseError",
    "CredentialsError",
    "ProviderError",
    "EmptyResponseError",
]

_IMPORT_MAPPING = {
    "StrategyKind": (".types", "StrategyKind"),
    "Credential": (".types", "Credential"),
    "AuthError": (".types", "AuthError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    "RegionParseError": (".types", "RegionParseError"),
    "CredentialsError": (".types", "CredentialsError"),
    "ProviderError": (".types", "ProviderError"),
    "EmptyResponseError": (".types", "EmptyResponseError"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
