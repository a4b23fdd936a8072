"""출력 설정 모듈

환경변수 출력 형식 및 옵션 설정

Usage:
    from core.shared.io.config import OutputConfig, OutputFormat

    config = OutputConfig.from_string("fish", export=True)

    if config.format is OutputFormat.JSON:
        # JSON 출력
        pass
"""

from dataclasses import dataclass, field
from enum import Enum


class OutputFormat(Enum):
    """출력 형식

    - JSON: 한 줄 JSON 객체
    - BASH: NAME="value" (export 시 export NAME="value")
    - FISH: set NAME "value" (export 시 set -x NAME "value")
    - POWERSHELL: $NAME = "value" (export 시 $env:NAME = "value")
    """

    JSON = "json"
    BASH = "bash"
    FISH = "fish"
    POWERSHELL = "powershell"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> list[str]:
        """CLI 선택지 목록"""
        return [fmt.value for fmt in cls]


@dataclass(frozen=True)
class OutputConfig:
    """출력 설정

    Attributes:
        format: 출력 형식 (기본 BASH)
        export: export/persist 접두사 사용 여부 (JSON에서는 무시)
    """

    format: OutputFormat = field(default=OutputFormat.BASH)
    export: bool = False

    @classmethod
    def from_string(cls, format_str: str, export: bool = False) -> "OutputConfig":
        """문자열에서 OutputConfig 생성

        Args:
            format_str: 형식 문자열 ("json", "bash", "fish", "powershell")
            export: export 접두사 사용 여부

        Returns:
            OutputConfig 인스턴스

        Raises:
            ValueError: 알 수 없는 형식
        """
        return cls(format=OutputFormat(format_str.lower()), export=export)
