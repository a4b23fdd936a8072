# core/auth/provider/static.py
"""
정적 자격 증명 Provider

credentials 파일(및 프로파일 미지정 시 환경변수)에서 장기/사전 발급 키를 읽습니다.
STS 호출은 하지 않습니다.

Provider 체인 (botocore 규칙과 동일):
    - 프로파일 지정: credentials 파일의 해당 섹션만 사용 (환경변수 무시)
    - 프로파일 미지정: 환경변수 → credentials 파일 [default] 섹션

config 파일의 role_arn 등은 읽지 않으므로 source_profile로 사용해도
다시 역할 전환이 일어나지 않습니다.

Usage:
    provider = StaticCredentialsProvider("~/.aws/credentials", profile_name="dev")
    credential = provider.load()

    # source_profile로 재지정
    caller = provider.narrow("ops").load()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from botocore.credentials import CredentialResolver, EnvProvider, SharedCredentialProvider
from botocore.exceptions import BotoCoreError, PartialCredentialsError

from core.auth.types import Credential, CredentialsError
from core.config import settings

logger = logging.getLogger(__name__)


class StaticCredentialsProvider:
    """credentials 파일 기반 정적 자격 증명 Provider

    Attributes:
        credentials_path: credentials 파일 경로
        profile_name: 대상 프로파일 (None이면 환경변수 → [default])
    """

    def __init__(
        self,
        credentials_path: str | os.PathLike[str],
        profile_name: str | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.credentials_path = os.path.expanduser(str(credentials_path))
        self.profile_name = profile_name
        self._environ = environ

    @property
    def name(self) -> str:
        """Provider 이름 (프로파일 이름 또는 기본 체인)"""
        return self.profile_name or "default-chain"

    def narrow(self, profile_name: str) -> StaticCredentialsProvider:
        """같은 credentials 파일에서 다른 프로파일로 좁힌 Provider 반환"""
        return StaticCredentialsProvider(self.credentials_path, profile_name, environ=self._environ)

    def _build_resolver(self) -> CredentialResolver:
        providers = []
        if self.profile_name is None:
            # os.environ을 직접 넘기면 EnvProvider가 호출 시점 값을 읽음
            providers.append(EnvProvider(environ=self._environ))
        providers.append(
            SharedCredentialProvider(
                creds_filename=self.credentials_path,
                profile_name=self.profile_name or settings.DEFAULT_PROFILE,
            )
        )
        return CredentialResolver(providers=providers)

    def load(self) -> Credential:
        """자격 증명 로드

        Returns:
            정규화된 Credential

        Raises:
            CredentialsError: 파일을 읽을 수 없거나, 파일/프로파일/키가 없거나 일부 키만 있는 경우
        """
        if self.profile_name is not None:
            self._ensure_readable()

        try:
            credentials = self._build_resolver().load_credentials()
        except PartialCredentialsError as e:
            raise CredentialsError(f"incomplete credentials for profile '{self.name}'", self.profile_name, e) from e
        except BotoCoreError as e:
            raise CredentialsError(f"failed to load credentials for profile '{self.name}'", self.profile_name, e) from e

        if credentials is None:
            raise CredentialsError(self._missing_reason(), self.profile_name)

        frozen = credentials.get_frozen_credentials()
        logger.debug("정적 자격 증명 로드: %s (method=%s)", self.name, credentials.method)
        return Credential(
            access_key_id=frozen.access_key,
            secret_access_key=frozen.secret_key,
            session_token=frozen.token or None,
        )

    def _ensure_readable(self) -> None:
        # SharedCredentialProvider는 열기 실패(OSError)를 파일 없음과 구분하지 않음
        if not os.path.isfile(self.credentials_path):
            return
        try:
            with open(self.credentials_path, "rb"):
                pass
        except OSError as e:
            raise CredentialsError(
                f"cannot read credentials file: {self.credentials_path}", self.profile_name, e
            ) from e

    def _missing_reason(self) -> str:
        if not os.path.isfile(self.credentials_path):
            return f"credentials file not found: {self.credentials_path}"
        self._ensure_readable()
        if self.profile_name is None:
            return f"no credentials in environment or [default] section of {self.credentials_path}"
        return f"profile '{self.profile_name}' not found (or has no aws_access_key_id) in {self.credentials_path}"
