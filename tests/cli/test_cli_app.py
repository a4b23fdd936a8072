# tests/cli/test_cli_app.py
"""
cli/app.py 단위 테스트

CLI 메인 엔트리포인트 테스트. CliRunner로 get/exec/list 서브명령을 실행합니다.
"""

import json
import sys

import pytest
from click.testing import CliRunner

from cli.app import cli

# =============================================================================
# 픽스처
# =============================================================================


@pytest.fixture
def runner():
    """Click CliRunner"""
    return CliRunner()


@pytest.fixture
def file_args(standard_aws_files):
    """표준 설정 파일을 가리키는 전역 옵션"""
    return ["-c", str(standard_aws_files.config_path), "-d", str(standard_aws_files.credentials_path)]


@pytest.fixture
def patched_sts(monkeypatch, mock_session_factory):
    """boto3.Session을 mock 팩토리로 교체"""
    monkeypatch.setattr("boto3.Session", mock_session_factory)
    return mock_session_factory


# =============================================================================
# CLI 그룹 테스트
# =============================================================================


class TestCLI:
    """CLI 그룹 테스트"""

    def test_version_option(self, runner):
        """--version 옵션 테스트"""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "stsenv" in result.output

    def test_help_option(self, runner):
        result = runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        for command in ("get", "exec", "list"):
            assert command in result.output

    def test_get_help(self, runner):
        result = runner.invoke(cli, ["get", "--help"])

        assert result.exit_code == 0
        assert "--export" in result.output
        assert "powershell" in result.output


# =============================================================================
# get
# =============================================================================


class TestGetCommand:
    """get 서브명령 테스트"""

    def test_static_profile_bash(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-p", "static-only", "get"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            'AWS_ACCESS_KEY_ID="AKIASTATIC"',
            'AWS_SECRET_ACCESS_KEY="static-secret"',
            'AWS_SESSION_TOKEN="static-token"',
            'AWS_SECURITY_TOKEN="static-token"',
        ]

    def test_static_region_from_option_only(self, runner, file_args):
        """정적 분기는 --region만 AWS_DEFAULT_REGION으로 출력"""
        result = runner.invoke(cli, [*file_args, "-p", "dev", "-R", "us-west-2", "get", "--export"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            'export AWS_ACCESS_KEY_ID="AKIADEV"',
            'export AWS_SECRET_ACCESS_KEY="dev-secret"',
            'export AWS_DEFAULT_REGION="us-west-2"',
        ]

    def test_fish_export(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-p", "dev", "get", "--export", "-f", "fish"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == 'set -x AWS_ACCESS_KEY_ID "AKIADEV"'

    def test_powershell(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-p", "dev", "get", "--format", "powershell"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == '$AWS_ACCESS_KEY_ID = "AKIADEV"'

    def test_json(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-p", "dev", "get", "-f", "json"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {"AWS_ACCESS_KEY_ID": "AKIADEV", "AWS_SECRET_ACCESS_KEY": "dev-secret"}

    def test_default_chain_from_environment(self, runner, file_args, monkeypatch):
        """프로파일 미지정 시 환경변수 자격 증명"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAENV")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env-secret")

        result = runner.invoke(cli, [*file_args, "get"])

        assert result.exit_code == 0, result.output
        assert 'AWS_ACCESS_KEY_ID="AKIAENV"' in result.output.splitlines()

    def test_profile_from_environment_variable(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "get"], env={"AWS_PROFILE": "dev"})

        assert result.exit_code == 0, result.output
        assert 'AWS_ACCESS_KEY_ID="AKIADEV"' in result.output.splitlines()

    def test_assume_role(self, runner, file_args, patched_sts, mock_sts_client):
        result = runner.invoke(cli, [*file_args, "-p", "prod", "-n", "ci-job", "get", "--export"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            'export AWS_ACCESS_KEY_ID="ASIAASSUMED"',
            'export AWS_SECRET_ACCESS_KEY="assumed-secret"',
            'export AWS_SESSION_TOKEN="assumed-token"',
            'export AWS_SECURITY_TOKEN="assumed-token"',
            'export AWS_DEFAULT_REGION="ap-northeast-2"',
        ]
        mock_sts_client.assume_role.assert_called_once_with(
            RoleArn="arn:aws:iam::222222222222:role/AdminRole",
            RoleSessionName="ci-job",
        )
        assert patched_sts.call_args.kwargs["aws_access_key_id"] == "AKIADEV"

    def test_session_token_with_mfa(self, runner, file_args, patched_sts, mock_sts_client):
        result = runner.invoke(
            cli,
            [
                *file_args,
                "-p",
                "mfa",
                "--mfa-serial",
                "arn:aws:iam::111111111111:mfa/me",
                "--mfa-token",
                "123456",
                "get",
            ],
        )

        assert result.exit_code == 0, result.output
        assert 'AWS_DEFAULT_REGION="eu-west-1"' in result.output.splitlines()
        mock_sts_client.get_session_token.assert_called_once_with(
            SerialNumber="arn:aws:iam::111111111111:mfa/me",
            TokenCode="123456",
        )

    def test_sts_error(self, runner, file_args, patched_sts, mock_sts_client, make_client_error):
        mock_sts_client.assume_role.side_effect = make_client_error("AccessDenied", "not authorized")

        result = runner.invoke(cli, [*file_args, "-p", "prod", "get"])

        assert result.exit_code == 1
        assert "Error: [sts] assume_role: AccessDenied: not authorized" in result.output
        assert "AWS_ACCESS_KEY_ID" not in result.output

    def test_sts_error_message_printed_literally(
        self, runner, file_args, patched_sts, mock_sts_client, make_client_error
    ):
        """에러 메시지의 :name: 형태 문자열은 이모지로 바뀌지 않음"""
        mock_sts_client.assume_role.side_effect = make_client_error(
            "AccessDenied", "denied :thumbs_up: [bold]x[/bold]"
        )

        result = runner.invoke(cli, [*file_args, "-p", "prod", "get"])

        assert result.exit_code == 1
        assert "AccessDenied: denied :thumbs_up: [bold]x[/bold]" in result.output

    def test_unreadable_config_file(self, runner, aws_files, deny_open):
        """읽을 수 없는 config 파일은 빈 파일로 취급하지 않고 실패"""
        aws_files.write_credentials(
            """
            [dev]
            aws_access_key_id = AKIADEV
            aws_secret_access_key = dev-secret
            """
        )
        aws_files.write_config(
            """
            [profile dev]
            role_arn = arn:aws:iam::222222222222:role/AdminRole
            """
        )
        deny_open(aws_files.config_path)

        result = runner.invoke(
            cli, ["-c", str(aws_files.config_path), "-d", str(aws_files.credentials_path), "-p", "dev", "get"]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "AWS_ACCESS_KEY_ID" not in result.output

    def test_unreadable_credentials_file(self, runner, file_args, standard_aws_files, deny_open):
        deny_open(standard_aws_files.credentials_path, module="core.auth.provider.static")

        result = runner.invoke(cli, [*file_args, "-p", "static-only", "get"])

        assert result.exit_code == 1
        assert "cannot read credentials file" in result.output
        assert "AKIASTATIC" not in result.output

    def test_unknown_region(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-R", "mars-1", "get"])

        assert result.exit_code == 1
        assert "Error: AWS Region parser error" in result.output
        assert "mars-1" in result.output

    def test_missing_profile(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "-p", "nope", "get"])

        assert result.exit_code == 1
        assert "Error: AWS Credentials error" in result.output

    def test_invalid_format(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "get", "-f", "zsh"])

        assert result.exit_code == 2


# =============================================================================
# exec
# =============================================================================


class TestExecCommand:
    """exec 서브명령 테스트"""

    def test_env_injected(self, runner, file_args):
        script = (
            "import os, sys; "
            "sys.exit(0 if os.environ.get('AWS_ACCESS_KEY_ID') == 'AKIASTATIC' "
            "and os.environ.get('AWS_SECURITY_TOKEN') == 'static-token' else 3)"
        )

        result = runner.invoke(cli, [*file_args, "-p", "static-only", "exec", sys.executable, "-c", script])

        assert result.exit_code == 0, result.output

    def test_child_exit_code_propagated(self, runner, file_args):
        result = runner.invoke(
            cli, [*file_args, "-p", "dev", "exec", "--", sys.executable, "-c", "import sys; sys.exit(7)"]
        )

        assert result.exit_code == 7
        assert "child exited with code 7" in result.output

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX 시그널 필요")
    def test_child_killed_by_signal(self, runner, file_args):
        script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"

        result = runner.invoke(cli, [*file_args, "-p", "dev", "exec", "--", sys.executable, "-c", script])

        assert result.exit_code == 1
        assert "process killed" in result.output

    def test_spawn_failure(self, runner, file_args, tmp_path):
        result = runner.invoke(cli, [*file_args, "-p", "dev", "exec", str(tmp_path / "missing-binary")])

        assert result.exit_code == 1
        assert "Error: failed to spawn" in result.output

    def test_resolution_failure_does_not_spawn(self, runner, file_args, tmp_path):
        marker = tmp_path / "ran"
        script = f"open({str(marker)!r}, 'w').close()"

        result = runner.invoke(cli, [*file_args, "-p", "nope", "exec", sys.executable, "-c", script])

        assert result.exit_code == 1
        assert not marker.exists()

    def test_command_required(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "exec"])

        assert result.exit_code == 2


# =============================================================================
# list
# =============================================================================


class TestListCommand:
    """list 서브명령 테스트"""

    def test_list(self, runner, file_args):
        result = runner.invoke(cli, [*file_args, "list"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["dev", "static-only", "prod", "mfa", "plain-role"]

    def test_list_missing_files(self, runner, aws_files):
        result = runner.invoke(
            cli, ["-c", str(aws_files.config_path), "-d", str(aws_files.credentials_path), "list"]
        )

        assert result.exit_code == 0
        assert result.output == ""

    def test_list_default_paths(self, runner, tmp_path):
        """경로 미지정 시 HOME/.aws 하위 파일"""
        aws_dir = tmp_path / "home" / ".aws"
        aws_dir.mkdir()
        (aws_dir / "credentials").write_text("[alpha]\naws_access_key_id = A\n", encoding="utf-8")

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["alpha"]

    def test_list_without_home(self, runner, monkeypatch):
        monkeypatch.delenv("HOME")

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_list_unreadable_credentials(self, runner, standard_aws_files, deny_open):
        deny_open(standard_aws_files.credentials_path)

        result = runner.invoke(
            cli,
            ["-c", str(standard_aws_files.config_path), "-d", str(standard_aws_files.credentials_path), "list"],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "dev" not in result.output.splitlines()
