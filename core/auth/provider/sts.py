# core/auth/provider/sts.py
"""
STS 원격 호출 래퍼

호출자 자격 증명(Credential)과 리전으로 STS 클라이언트를 만들고
AssumeRole / GetSessionToken을 한 번씩만 호출합니다 (로컬 재시도 없음).

에러 변환:
    - botocore ClientError  → ProviderError (서비스 에러 코드 포함)
    - botocore BotoCoreError → ProviderError (전송/TLS 오류)
    - Credentials 항목 없음  → EmptyResponseError
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from core.auth.types import Credential, EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)

SERVICE_NAME = "sts"

# 단일 시도 (botocore 기본 재시도 비활성화)
_CLIENT_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})


class StsClient:
    """STS 호출 클라이언트

    Attributes:
        region: STS 엔드포인트 리전
    """

    def __init__(
        self,
        caller: Credential,
        region: str,
        session_factory: Callable[..., Any] | None = None,
    ):
        self.region = region
        self._caller = caller
        self._session_factory = session_factory or boto3.Session
        self._client: Any = None

    def _get_client(self) -> Any:
        if self._client is None:
            session = self._session_factory(
                aws_access_key_id=self._caller.access_key_id,
                aws_secret_access_key=self._caller.secret_access_key,
                aws_session_token=self._caller.session_token,
                region_name=self.region,
            )
            self._client = session.client(SERVICE_NAME, config=_CLIENT_CONFIG)
        return self._client

    def assume_role(
        self,
        role_arn: str,
        session_name: str,
        mfa_serial: str | None = None,
        mfa_token_code: str | None = None,
    ) -> Credential:
        """AssumeRole 호출

        Args:
            role_arn: 대상 역할 ARN
            session_name: RoleSessionName (CloudTrail에 기록됨)
            mfa_serial: MFA 디바이스 시리얼
            mfa_token_code: MFA 토큰 코드

        Raises:
            ProviderError: 서비스/전송 오류
            EmptyResponseError: 응답에 자격 증명이 없음
        """
        kwargs: dict[str, Any] = {"RoleArn": role_arn, "RoleSessionName": session_name}
        kwargs.update(_mfa_kwargs(mfa_serial, mfa_token_code))

        logger.debug("AssumeRole 호출: role=%s, session=%s, region=%s", role_arn, session_name, self.region)
        return self._call("assume_role", kwargs)

    def get_session_token(
        self,
        mfa_serial: str | None = None,
        mfa_token_code: str | None = None,
    ) -> Credential:
        """GetSessionToken 호출

        Raises:
            ProviderError: 서비스/전송 오류
            EmptyResponseError: 응답에 자격 증명이 없음
        """
        logger.debug("GetSessionToken 호출: region=%s, mfa=%s", self.region, bool(mfa_serial))
        return self._call("get_session_token", _mfa_kwargs(mfa_serial, mfa_token_code))

    def _call(self, operation: str, kwargs: dict[str, Any]) -> Credential:
        try:
            response = getattr(self._get_client(), operation)(**kwargs)
        except ClientError as e:
            raise ProviderError.from_client_error(SERVICE_NAME, operation, e) from e
        except BotoCoreError as e:
            raise ProviderError(SERVICE_NAME, operation, "request failed", cause=e) from e

        payload = (response or {}).get("Credentials")
        if not payload or not payload.get("AccessKeyId") or not payload.get("SecretAccessKey"):
            raise EmptyResponseError(SERVICE_NAME, operation)

        return Credential.from_sts_response(payload)


def _mfa_kwargs(mfa_serial: str | None, mfa_token_code: str | None) -> dict[str, str]:
    kwargs = {}
    if mfa_serial:
        kwargs["SerialNumber"] = mfa_serial
    if mfa_token_code:
        kwargs["TokenCode"] = mfa_token_code
    return kwargs
