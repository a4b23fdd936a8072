# core/auth/session.py
"""
core/auth/session.py - 세션 환경변수 구성

정규화된 Credential과 리전을 AWS 도구가 인식하는 환경변수 이름으로 매핑합니다.

    AWS_ACCESS_KEY_ID       항상
    AWS_SECRET_ACCESS_KEY   항상
    AWS_SESSION_TOKEN       세션 토큰이 있을 때
    AWS_SECURITY_TOKEN      세션 토큰이 있을 때 (레거시 별칭, 같은 값)
    AWS_DEFAULT_REGION      리전이 주어졌을 때

Usage:
    from core.auth.session import materialize

    env = materialize(credential, region="eu-west-1")
    os.environ.update(env)
"""

from __future__ import annotations

from core.auth.types import Credential

ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
SESSION_TOKEN = "AWS_SESSION_TOKEN"
SECURITY_TOKEN = "AWS_SECURITY_TOKEN"
DEFAULT_REGION = "AWS_DEFAULT_REGION"

ALL_VARIABLES = (ACCESS_KEY_ID, SECRET_ACCESS_KEY, SESSION_TOKEN, SECURITY_TOKEN, DEFAULT_REGION)


def materialize(credential: Credential, region: str | None = None) -> dict[str, str]:
    """Credential을 환경변수 매핑으로 변환

    Args:
        credential: 정규화된 자격 증명
        region: AWS_DEFAULT_REGION 값 (None이면 설정하지 않음)

    Returns:
        {변수 이름: 값} (ALL_VARIABLES 순서)
    """
    env = {
        ACCESS_KEY_ID: credential.access_key_id,
        SECRET_ACCESS_KEY: credential.secret_access_key,
    }

    if credential.is_temporary:
        env[SESSION_TOKEN] = credential.session_token
        env[SECURITY_TOKEN] = credential.session_token

    if region:
        env[DEFAULT_REGION] = region

    return env
