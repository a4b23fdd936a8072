# core/region - 리전 데이터 및 검증
"""
리전 데이터 모듈

Usage:
    from core.region import parse_region

    region = parse_region("eu-west-1")   # "eu-west-1"
    parse_region("mars-1")               # RegionParseError

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = ["ALL_REGIONS", "is_valid_region", "parse_region"]


def is_valid_region(name: str) -> bool:
    """알려진 리전 식별자인지 확인"""
    from .data import ALL_REGIONS

    return name in ALL_REGIONS


def parse_region(name: str) -> str:
    """리전 문자열을 검증하고 정규화된 리전 식별자를 반환

    앞뒤 공백만 제거하며 대소문자는 변환하지 않습니다.

    Args:
        name: 리전 문자열 (예: "eu-west-1")

    Returns:
        검증된 리전 식별자

    Raises:
        RegionParseError: 알 수 없는 리전인 경우
    """
    candidate = name.strip()
    if is_valid_region(candidate):
        return candidate

    from core.auth.types import RegionParseError

    raise RegionParseError(name)


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name == "ALL_REGIONS":
        from .data import ALL_REGIONS

        return ALL_REGIONS

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
