# core/auth/provider/__init__.py
"""
자격 증명 Provider 구현 모듈

Provider 목록:
- StaticCredentialsProvider: credentials 파일/환경변수의 정적 키 (STS 호출 없음)
- StsClient: 호출자 자격 증명으로 STS AssumeRole / GetSessionToken 호출

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    "StaticCredentialsProvider",
    "StsClient",
]

_IMPORT_MAPPING = {
    "StaticCredentialsProvider": (".static", "StaticCredentialsProvider"),
    "StsClient": (".sts", "StsClient"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
