"""
shared/io/output - 환경변수 출력 렌더러

materialize()가 만든 환경변수 매핑을 셸 할당문 또는 JSON 한 줄로 변환합니다.

형식별 규칙:
  - bash:       [export ]NAME="value"        역슬래시, 큰따옴표 앞에 역슬래시
  - fish:       set[ -x] NAME "value"         bash와 같은 이스케이프
  - powershell: $[env:]NAME = "value"         NUL, CR, LF, TAB, 백틱, 큰따옴표 앞에 백틱
  - json:       {"NAME": "value", ...}        JSON 문자열 이스케이프만 적용

Usage:
    from core.shared.io.config import OutputConfig
    from core.shared.io.output import render

    for line in render(env, OutputConfig.from_string("fish", export=True)):
        click.echo(line)
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping

from core.exceptions import OutputError
from core.shared.io.config import OutputConfig, OutputFormat

_SHELL_RE = re.compile(r'[\\"]')
_POWERSHELL_RE = re.compile(r'[\0\r\n\t`"]')


def escape_shell(value: str) -> str:
    """bash/fish 큰따옴표 문자열용 이스케이프"""
    return _SHELL_RE.sub(r"\\\g<0>", value)


def escape_powershell(value: str) -> str:
    """PowerShell 큰따옴표 문자열용 이스케이프"""
    return _POWERSHELL_RE.sub(r"`\g<0>", value)


def render_bash(env: Mapping[str, str], export: bool = False) -> list[str]:
    prefix = "export " if export else ""
    return [f'{prefix}{name}="{escape_shell(value)}"' for name, value in env.items()]


def render_fish(env: Mapping[str, str], export: bool = False) -> list[str]:
    statement = "set -x" if export else "set"
    return [f'{statement} {name} "{escape_shell(value)}"' for name, value in env.items()]


def render_powershell(env: Mapping[str, str], export: bool = False) -> list[str]:
    scope = "env:" if export else ""
    return [f'${scope}{name} = "{escape_powershell(value)}"' for name, value in env.items()]


def render_json(env: Mapping[str, str]) -> list[str]:
    """JSON 한 줄로 직렬화

    Raises:
        OutputError: 직렬화 실패
    """
    try:
        return [json.dumps(dict(env), ensure_ascii=False)]
    except (TypeError, ValueError) as e:
        raise OutputError(str(OutputFormat.JSON), "직렬화 실패", cause=e) from e


def render(env: Mapping[str, str], config: OutputConfig) -> list[str]:
    """출력 설정에 따라 환경변수 매핑을 출력 줄 목록으로 변환"""
    if config.format is OutputFormat.JSON:
        return render_json(env)
    if config.format is OutputFormat.FISH:
        return render_fish(env, config.export)
    if config.format is OutputFormat.POWERSHELL:
        return render_powershell(env, config.export)
    return render_bash(env, config.export)


__all__: list[str] = [
    "escape_shell",
    "escape_powershell",
    "render",
    "render_bash",
    "render_fish",
    "render_powershell",
    "render_json",
]
