# core/auth/types/types.py
"""
core/auth/types/types.py - 자격 증명 해석 모듈의 핵심 타입 정의

이 모듈은 자격 증명 해석 체인 전체에서 사용되는 기본 타입들을 정의합니다.

포함 항목:
    - StrategyKind: 자격 증명 획득 전략 열거형 (STATIC, SESSION_TOKEN, ASSUME_ROLE)
    - Credential: 정규화된 자격 증명 (access key / secret key / session token)
    - 에러 클래스: AuthError, ConfigurationError, RegionParseError,
      CredentialsError, ProviderError, EmptyResponseError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from core.exceptions import StsEnvError

# =============================================================================
# Strategy Kind Enum
# =============================================================================


class StrategyKind(Enum):
    """자격 증명 획득 전략 타입을 나타내는 열거형

    - STATIC: credentials 파일/환경변수의 키를 그대로 사용 (STS 호출 없음)
    - SESSION_TOKEN: STS GetSessionToken으로 임시 자격 증명 발급
    - ASSUME_ROLE: STS AssumeRole로 역할의 임시 자격 증명 발급
    """

    STATIC = "static"
    SESSION_TOKEN = "session-token"
    ASSUME_ROLE = "assume-role"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Credential
# =============================================================================


@dataclass(frozen=True)
class Credential:
    """정규화된 자격 증명

    호출마다 새로 생성되며 저장되거나 로그에 남지 않습니다.
    repr에서 비밀 값은 가려집니다.

    Attributes:
        access_key_id: 액세스 키 ID
        secret_access_key: 시크릿 액세스 키
        session_token: 세션 토큰 (임시 자격 증명인 경우)
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)

    @property
    def is_temporary(self) -> bool:
        """세션 토큰이 있는 임시 자격 증명인지 여부"""
        return bool(self.session_token)

    @classmethod
    def from_sts_response(cls, payload: dict[str, Any]) -> Credential:
        """STS 응답의 Credentials 항목에서 생성

        Args:
            payload: {"AccessKeyId", "SecretAccessKey", "SessionToken", ...}
        """
        return cls(
            access_key_id=payload["AccessKeyId"],
            secret_access_key=payload["SecretAccessKey"],
            session_token=payload.get("SessionToken") or None,
        )


# =============================================================================
# Error Classes
# =============================================================================


class AuthError(StsEnvError):
    """자격 증명 해석 관련 기본 에러 클래스

    모든 인증 에러의 부모 클래스입니다.
    원인 예외(cause)를 체이닝하여 디버깅을 용이하게 합니다.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)


class ConfigurationError(AuthError):
    """설정 오류가 발생했을 때 발생하는 에러

    홈 디렉토리를 결정할 수 없거나, 설정 파일 파싱 실패,
    알 수 없는 리전 등의 경우 발생합니다.

    Attributes:
        config_key: 문제가 된 설정 키 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class RegionParseError(ConfigurationError):
    """알 수 없는 리전 문자열

    Attributes:
        region: 파싱에 실패한 원본 문자열
    """

    def __init__(self, region: str, cause: Exception | None = None):
        super().__init__(f"AWS Region parser error: unknown region '{region}'", config_key="region", cause=cause)
        self.region = region


class CredentialsError(AuthError):
    """자격 증명 Provider 체인 실패

    credentials 파일 없음, 프로파일 섹션 없음, 키 누락 등의 경우 발생합니다.

    Attributes:
        profile: 대상 프로파일 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        profile: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(f"AWS Credentials error: {message}", cause)
        self.profile = profile
        if profile:
            self.details["profile"] = profile


class ProviderError(AuthError):
    """원격 서비스(STS) 호출에서 발생하는 에러

    전송/TLS 오류와 서비스가 반환한 오류를 모두 포함합니다.
    에러 메시지 형식: "[provider] operation: message"

    Attributes:
        provider: 에러가 발생한 서비스 이름
        operation: 실패한 작업 이름 (예: "assume_role", "get_session_token")
        error_code: 서비스 에러 코드 (ClientError인 경우)
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        message: str,
        cause: Exception | None = None,
        error_code: str | None = None,
    ):
        full_message = f"[{provider}] {operation}: {message}"
        super().__init__(full_message, cause)
        self.provider = provider
        self.operation = operation
        self.error_code = error_code
        self.details.update({"provider": provider, "operation": operation, "error_code": error_code})

    @classmethod
    def from_client_error(
        cls,
        provider: str,
        operation: str,
        client_error: Exception,
    ) -> ProviderError:
        """botocore.exceptions.ClientError로부터 생성

        Args:
            provider: 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            ProviderError 인스턴스
        """
        error_code = None
        error_message = str(client_error)

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message") or error_message

        message = f"{error_code}: {error_message}" if error_code else error_message
        return cls(provider, operation, message, error_code=error_code)


class EmptyResponseError(ProviderError):
    """STS 호출은 성공했지만 Credentials 항목이 없는 경우

    서비스 계약 위반이며 빈 Credential을 반환하지 않고 실패합니다.
    """

    def __init__(self, provider: str, operation: str):
        super().__init__(provider, operation, "response did not contain credentials")
