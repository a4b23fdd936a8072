"""core/shared/io - 출력 설정(config)과 렌더러(output)"""
