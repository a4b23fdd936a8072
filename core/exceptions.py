"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    StsEnvError (베이스)
    ├── AuthError (자격 증명 해석) - core.auth.types에서 정의
    │   ├── ConfigurationError
    │   │   └── RegionParseError
    │   ├── CredentialsError
    │   └── ProviderError
    │       └── EmptyResponseError
    ├── OutputError (출력 직렬화)
    └── ProcessError (하위 프로세스)
        ├── SpawnError
        ├── ChildExitedError
        └── ProcessKilledError

인증 계열과 프로세스 계열은 분리되어 있어 호출자가 관심사별로 처리할 수 있습니다.

Usage:
    from core.exceptions import ChildExitedError, StsEnvError

    try:
        spawn("make", ["test"], env)
    except ChildExitedError as e:
        sys.exit(e.code)
    except StsEnvError as e:
        print(f"Error: {e}", file=sys.stderr)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class StsEnvError(Exception):
    """stsenv 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# 출력 관련 예외
# =============================================================================


class OutputError(StsEnvError):
    """출력 직렬화 실패 예외"""

    def __init__(
        self,
        output_format: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"출력 오류 [{output_format}]: {message}"
        super().__init__(full_message, cause)
        self.output_format = output_format
        self.details["output_format"] = output_format


# =============================================================================
# 하위 프로세스 관련 예외
# =============================================================================


class ProcessError(StsEnvError):
    """하위 프로세스 실행 관련 예외"""

    def __init__(
        self,
        command: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.command = command
        self.details["command"] = command


class SpawnError(ProcessError):
    """프로세스를 시작할 수 없는 경우 (실행 파일 없음, 권한 없음 등)"""

    def __init__(self, command: str, cause: Optional[Exception] = None):
        super().__init__(command, f"failed to spawn `{command}`", cause)


class ChildExitedError(ProcessError):
    """하위 프로세스가 0이 아닌 종료 코드로 끝난 경우

    Attributes:
        code: 하위 프로세스 종료 코드
    """

    def __init__(self, command: str, code: int):
        super().__init__(command, f"child exited with code {code}")
        self.code = code
        self.details["code"] = code


class ProcessKilledError(ProcessError):
    """하위 프로세스가 시그널로 종료되어 종료 코드가 없는 경우

    Attributes:
        signal: 종료 시그널 번호 (알 수 있는 경우)
    """

    def __init__(self, command: str, signal: Optional[int] = None):
        message = "process killed"
        if signal is not None:
            message = f"{message} (signal {signal})"
        super().__init__(command, message)
        self.signal = signal
        self.details["signal"] = signal


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        "Error: " 접두사가 붙은 한 줄 메시지
    """
    if isinstance(error, StsEnvError):
        # 커스텀 예외는 이미 포맷팅됨
        return f"Error: {error}"

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))
        return f"Error: {code}: {message}"

    return f"Error: {error}"
