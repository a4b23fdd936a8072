# core/__init__.py
"""
core - stsenv 자격 증명 해석 인프라

CLI를 제외한 모든 기능을 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # 자격 증명 해석 (params, config, provider, resolver, session)
    ├── region/         # 리전 데이터 및 검증
    ├── shared/         # 공유 유틸리티 (출력 렌더러, 하위 프로세스)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_home_dir
    region = settings.DEFAULT_REGION  # "us-east-1"

    # 예외 처리
    from core.exceptions import StsEnvError, format_error_for_user
    try:
        credential = resolve(params)
    except StsEnvError as e:
        print(format_error_for_user(e))

    # 자격 증명 해석
    from core.auth import plan, execute, materialize
    strategy = plan(params)
    env = materialize(execute(strategy), strategy.region)
"""

__all__: list[str] = [
    # 서브패키지
    "auth",
    "region",
    "shared",
    # 모듈
    "config",
    "exceptions",
]
