#!/usr/bin/env python3
"""
폴더 정리 도구 - 메인 진입점

사용법:
    # 대화형 메뉴
    python main.py

    # 공통 이름 자동 감지 (미리보기)
    python main.py [대상폴더] --auto

    # 검색어 기반 정리
    python main.py [대상폴더] --by-name 검색어 --execute

    # 유형별 정리
    python main.py [대상폴더] --by-type --execute

기능:
    1. 파일 유형(확장자)별 정리 (위험 확장자 제외)
    2. 검색어가 포함된 파일 묶기
    3. 공통 이름 토큰 자동 감지 후 폴더별 정리
    4. 유형별 파일 목록
"""

import sys
import io


# Windows 콘솔 인코딩 설정
def _setup_console_encoding():
    """Windows 콘솔 인코딩 설정"""
    if sys.platform == 'win32':
        try:
            if hasattr(sys.stdout, 'buffer') and sys.stdout.buffer and not sys.stdout.closed:
                sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
            if hasattr(sys.stderr, 'buffer') and sys.stderr.buffer and not sys.stderr.closed:
                sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')
        except (ValueError, AttributeError, OSError):
            pass


def main():
    """메인 함수"""
    _setup_console_encoding()

    from dirsort.cli import run_cli
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
