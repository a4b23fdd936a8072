"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    stsenv [전역 옵션] get [--export] [-f json|bash|fish|powershell]
    stsenv [전역 옵션] exec COMMAND [ARGS...]
    stsenv [전역 옵션] list

    예시:
    stsenv -p prod get --export            # eval "$(stsenv -p prod get --export)"
    stsenv -p prod -R eu-west-1 get -f fish --export | source
    stsenv -p prod exec -- aws s3 ls       # 하위 프로세스에 자격 증명 주입
    stsenv list                            # 프로파일 목록

전역 옵션:
    -c, --config: config 파일 경로 (기본: ~/.aws/config, 환경변수 AWS_CONFIG_FILE)
    -d, --credentials: credentials 파일 경로 (기본: ~/.aws/credentials, 환경변수 AWS_SHARED_CREDENTIALS_FILE)
    -p, --profile: 프로파일 이름 (환경변수 AWS_PROFILE)
    -r, --role: AssumeRole 대상 역할 ARN 오버라이드
    -R, --region: 리전 (예: eu-west-1)
    -n, --name: AssumeRole 세션 이름 (CloudTrail에 기록)
    --mfa-serial / --mfa-token: MFA 디바이스 시리얼 / 토큰 코드
    --debug: 디버그 로그 (stderr)

종료 코드:
    0: 성공
    1: 해석/입출력/파싱/원격 호출 오류 ("Error: ..."를 stderr에 출력)
    N: exec로 실행한 하위 프로세스의 종료 코드
"""

import logging
from dataclasses import dataclass

import click
from rich.console import Console
from rich.markup import escape

from core.config import LogConfig, get_home_dir, get_version, settings
from core.exceptions import ChildExitedError, StsEnvError, format_error_for_user
from core.shared.io.config import OutputConfig, OutputFormat

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False, emoji=False)

VERSION = get_version()

# 디버그 모드에서도 원격 응답 본문(자격 증명 포함)이 로그에 남지 않도록 고정
_QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


@dataclass
class CliOptions:
    """전역 옵션 원본 값 (서브명령에서 EffectiveParams로 해석)"""

    config_file: str | None = None
    credentials_file: str | None = None
    profile: str | None = None
    role: str | None = None
    region: str | None = None
    name: str | None = None
    mfa_serial: str | None = None
    mfa_token: str | None = None

    def resolve(self):
        """EffectiveParams로 해석

        Raises:
            ConfigurationError: 홈 디렉토리 없음 / 알 수 없는 리전
        """
        from core.auth.params import resolve_params

        return resolve_params(
            config_file=self.config_file,
            credentials_file=self.credentials_file,
            profile=self.profile,
            role=self.role,
            region=self.region,
            session_name=self.name,
            mfa_serial=self.mfa_serial,
            mfa_token_code=self.mfa_token,
            home=get_home_dir(),
        )


def _configure_logging(debug: bool) -> None:
    """로깅 설정 (stdout은 셸 출력 전용이므로 stderr 사용)"""
    log_config = LogConfig.from_env(debug=debug)
    logging.basicConfig(level=log_config.level, format=log_config.format, datefmt=log_config.datefmt)
    logging.getLogger().setLevel(log_config.level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _fail(error: Exception, exit_code: int = 1) -> None:
    """에러 메시지를 stderr에 출력하고 종료"""
    err_console.print(f"[red]{escape(format_error_for_user(error))}[/red]", soft_wrap=True)
    raise SystemExit(exit_code)


def _resolve_env(options: CliOptions) -> dict[str, str]:
    """전역 옵션 → 자격 증명 → 환경변수 매핑"""
    from core.auth.resolver import execute, plan
    from core.auth.session import materialize

    params = options.resolve()
    logger.debug("파라미터: %r", params)

    strategy = plan(params)
    credential = execute(strategy)
    return materialize(credential, strategy.region)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-c",
    "--config",
    "config_file",
    envvar=settings.ENV_CONFIG_FILE,
    metavar="FILE",
    help="config 파일 경로 (기본: ~/.aws/config)",
)
@click.option(
    "-d",
    "--credentials",
    "credentials_file",
    envvar=settings.ENV_CREDENTIALS_FILE,
    metavar="FILE",
    help="credentials 파일 경로 (기본: ~/.aws/credentials)",
)
@click.option(
    "-p", "--profile", "profile", envvar=settings.ENV_PROFILE, help="config/credentials 파일의 프로파일"
)
@click.option("-r", "--role", "role", metavar="ARN", help="AssumeRole 대상 역할 ARN")
@click.option("-R", "--region", "region", help="리전 (예: eu-west-1)")
@click.option("-n", "--name", "name", help="AssumeRole 세션 이름 (CloudTrail에 기록) [\\w+=,.@-]*")
@click.option("--mfa-serial", "mfa_serial", metavar="ARN", help="MFA 디바이스 시리얼")
@click.option("--mfa-token", "mfa_token", metavar="CODE", help="MFA 토큰 코드")
@click.option("--debug", is_flag=True, help="디버그 로그 출력 (stderr)")
@click.version_option(version=VERSION, prog_name="stsenv")
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    credentials_file: str | None,
    profile: str | None,
    role: str | None,
    region: str | None,
    name: str | None,
    mfa_serial: str | None,
    mfa_token: str | None,
    debug: bool,
) -> None:
    """AWS STS 임시 자격 증명을 셸 또는 하위 프로세스에 제공합니다."""
    _configure_logging(debug)
    ctx.obj = CliOptions(
        config_file=config_file,
        credentials_file=credentials_file,
        profile=profile,
        role=role,
        region=region,
        name=name,
        mfa_serial=mfa_serial,
        mfa_token=mfa_token,
    )


@cli.command("get")
@click.option(
    "--export", "export", is_flag=True, help="export 접두사 사용 (bash: export, fish: set -x, powershell: $env:)"
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OutputFormat.choices()),
    default=OutputFormat.BASH.value,
    show_default=True,
    help="출력 형식",
)
@click.pass_obj
def get_command(options: CliOptions, export: bool, output_format: str) -> None:
    """임시 자격 증명을 발급받아 환경변수 형식으로 출력"""
    from core.shared.io.output import render

    try:
        env = _resolve_env(options)
        lines = render(env, OutputConfig.from_string(output_format, export=export))
    except StsEnvError as e:
        _fail(e)
        return

    for line in lines:
        click.echo(line)


@cli.command(
    "exec",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def exec_command(options: CliOptions, command: tuple[str, ...]) -> None:
    """자격 증명을 환경변수로 주입하여 명령 실행"""
    from core.shared.process import spawn

    try:
        env = _resolve_env(options)
        spawn(command[0], list(command[1:]), env)
    except ChildExitedError as e:
        _fail(e, exit_code=e.code)
    except StsEnvError as e:
        _fail(e)


@cli.command("list")
@click.pass_obj
def list_command(options: CliOptions) -> None:
    """credentials 파일과 config 파일의 프로파일 이름 나열"""
    from core.auth.config import Loader

    try:
        params = options.resolve()
        names = Loader(
            config_path=params.config_file_path,
            credentials_path=params.credentials_file_path,
        ).list_profiles()
    except StsEnvError as e:
        _fail(e)
        return

    for profile_name in names:
        click.echo(profile_name)


if __name__ == "__main__":
    cli()
