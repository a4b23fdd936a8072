"""
core/shared - 공유 유틸리티

    io/         # 출력 설정 및 렌더러
    process.py  # 하위 프로세스 실행
"""
