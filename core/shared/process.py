"""
core/shared/process.py - 하위 프로세스 실행

환경변수를 추가한 상태로 명령을 실행하고 종료될 때까지 기다립니다.
상속받은 환경변수는 유지되며 타임아웃이나 재시도는 없습니다.

종료 상태:
    - 0            → 성공
    - 0이 아닌 코드 → ChildExitedError(code)
    - 시그널 종료   → ProcessKilledError
    - 시작 실패     → SpawnError
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

from core.exceptions import ChildExitedError, ProcessKilledError, SpawnError

logger = logging.getLogger(__name__)


def build_env(extra: Mapping[str, str], base: Mapping[str, str] | None = None) -> dict[str, str]:
    """현재(또는 base) 환경변수에 extra를 덮어쓴 새 환경 반환"""
    env = dict(os.environ if base is None else base)
    env.update(extra)
    return env


def spawn(executable: str, argv: Sequence[str], env: Mapping[str, str]) -> None:
    """명령 실행 후 종료 대기

    Args:
        executable: 실행 파일 (PATH 검색)
        argv: 인자 목록 (executable 제외)
        env: 추가할 환경변수

    Raises:
        SpawnError: 프로세스를 시작할 수 없음
        ChildExitedError: 0이 아닌 종료 코드
        ProcessKilledError: 시그널로 종료됨
    """
    command = [executable, *argv]
    logger.debug("프로세스 실행: %s (환경변수 %d개 추가)", executable, len(env))

    try:
        process = subprocess.Popen(command, env=build_env(env))
    except OSError as e:
        raise SpawnError(executable, cause=e) from e

    try:
        returncode = process.wait()
    except KeyboardInterrupt:
        # 시그널은 하위 프로세스도 받으므로 종료를 기다림
        returncode = process.wait()

    if returncode < 0:
        raise ProcessKilledError(executable, signal=-returncode)
    if returncode != 0:
        raise ChildExitedError(executable, returncode)
