"""
tests/conftest.py - pytest 공통 픽스처

AWS 설정 파일 생성 헬퍼와 STS 모킹을 제공합니다.

Usage:
    def test_something(aws_files, mock_sts_client):
        # aws_files: tmp_path에 config/credentials 파일 작성 헬퍼
        # mock_sts_client: assume_role/get_session_token 응답이 설정된 MagicMock
        pass
"""

import sys
import textwrap
from dataclasses import dataclass
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================

_ISOLATED_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SECURITY_TOKEN",
    "AWS_CREDENTIAL_EXPIRATION",
    "AWS_DEFAULT_REGION",
    "AWS_REGION",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_CONFIG_FILE",
    "AWS_SHARED_CREDENTIALS_FILE",
    "STSENV_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """테스트 환경 설정

    실제 ~/.aws 파일과 AWS_* 환경변수가 테스트에 섞이지 않도록
    HOME을 임시 디렉토리로 바꾸고 관련 환경변수를 제거합니다.
    """
    for name in _ISOLATED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)

    yield


# =============================================================================
# AWS 설정 파일 픽스처
# =============================================================================


@dataclass
class AwsFiles:
    """테스트용 config/credentials 파일 경로"""

    root: Path

    @property
    def config_path(self) -> Path:
        return self.root / "config"

    @property
    def credentials_path(self) -> Path:
        return self.root / "credentials"

    def write_config(self, content: str) -> Path:
        self.config_path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return self.config_path

    def write_credentials(self, content: str) -> Path:
        self.credentials_path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return self.credentials_path


@pytest.fixture
def aws_files(tmp_path):
    """tmp_path 하위 AWS 설정 파일 헬퍼 (파일은 작성 전까지 존재하지 않음)"""
    root = tmp_path / "aws"
    root.mkdir()
    return AwsFiles(root=root)


@pytest.fixture
def standard_aws_files(aws_files):
    """역할/세션/정적 프로파일이 모두 있는 설정 파일 세트"""
    aws_files.write_credentials(
        """
        [default]
        aws_access_key_id = AKIADEFAULT
        aws_secret_access_key = default-secret

        [dev]
        aws_access_key_id = AKIADEV
        aws_secret_access_key = dev-secret

        [static-only]
        aws_access_key_id = AKIASTATIC
        aws_secret_access_key = static-secret
        aws_session_token = static-token
        """
    )
    aws_files.write_config(
        """
        [default]
        region = eu-west-1

        [profile prod]
        role_arn = arn:aws:iam::222222222222:role/AdminRole
        source_profile = dev
        region = ap-northeast-2

        [profile mfa]
        source_profile = dev

        [profile plain-role]
        role_arn = arn:aws:iam::333333333333:role/ReadOnly
        """
    )
    return aws_files


@pytest.fixture
def deny_open(monkeypatch):
    """지정한 경로에 대해서만 모듈의 open()이 PermissionError를 내도록 설정

    root로 실행해도 chmod와 달리 항상 읽기 실패를 재현합니다.
    """
    import builtins

    real_open = builtins.open

    def apply(path, module="core.auth.config.loader"):
        def fake_open(file, *args, **kwargs):
            if Path(file) == Path(path):
                raise PermissionError(13, "Permission denied", str(path))
            return real_open(file, *args, **kwargs)

        monkeypatch.setattr(f"{module}.open", fake_open, raising=False)

    return apply


# =============================================================================
# STS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_sts_client():
    """STS 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.assume_role.return_value = {
        "Credentials": {
            "AccessKeyId": "ASIAASSUMED",
            "SecretAccessKey": "assumed-secret",
            "SessionToken": "assumed-token",
            "Expiration": "2024-12-31T23:59:59Z",
        }
    }

    mock_client.get_session_token.return_value = {
        "Credentials": {
            "AccessKeyId": "ASIASESSION",
            "SecretAccessKey": "session-secret",
            "SessionToken": "session-token",
            "Expiration": "2024-12-31T23:59:59Z",
        }
    }

    yield mock_client


@pytest.fixture
def mock_session_factory(mock_sts_client):
    """boto3.Session 대체 팩토리 (client()가 mock_sts_client 반환)"""
    factory = MagicMock()
    factory.return_value.client.return_value = mock_sts_client
    return factory


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "AssumeRole",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


@pytest.fixture
def make_client_error():
    """ClientError 생성 헬퍼 픽스처"""
    return create_mock_client_error


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def moto_sts():
        """moto를 사용한 STS 모킹"""
        with moto.mock_aws():
            yield

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_sts():
        pytest.skip("moto not installed")

