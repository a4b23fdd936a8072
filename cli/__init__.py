"""
cli - stsenv 명령줄 인터페이스

    app.py  # Click 그룹 (get, exec, list)
"""
