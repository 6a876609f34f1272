#!/usr/bin/env python3
"""
폴더 정리 도구 사용 예제

DirSorter 클래스를 프로그래밍 방식으로 사용하는 방법을 보여줍니다.
모든 예제는 드라이 런으로 실행되므로 파일이 실제로 이동하지 않습니다.
"""

from pathlib import Path

from dirsort.config import SorterConfig
from dirsort.organizer import (
    DirSorter,
    format_auto_detect_result,
    format_move_report,
    format_type_result,
)


# 정리 대상 폴더 (본인의 경로로 수정)
TARGET_DIR = Path.home() / "Downloads"


def example_1_auto_detect(sorter: DirSorter):
    """
    예제 1: 공통 이름 토큰 자동 감지

    'trip_paris_01.jpg', 'trip_paris_02.jpg' 같은 파일이 있으면
    'paris' 폴더로 묶일 예정인지 보여줍니다.
    """
    print("=" * 60)
    print("예제 1: 공통 이름 자동 감지")
    print("=" * 60)

    result = sorter.organize_by_auto_detect(TARGET_DIR, dry_run=True)
    print(format_auto_detect_result(result))


def example_2_explicit_match(sorter: DirSorter):
    """예제 2: 검색어 기반 정리"""
    print("\n" + "=" * 60)
    print("예제 2: 'invoice' 검색어 정리")
    print("=" * 60)

    report = sorter.organize_by_explicit_match(TARGET_DIR, "invoice", dry_run=True)
    print(format_move_report(report))


def example_3_by_type(sorter: DirSorter):
    """예제 3: 파일 유형별 정리"""
    print("\n" + "=" * 60)
    print("예제 3: 유형별 정리")
    print("=" * 60)

    result = sorter.organize_by_type(TARGET_DIR, dry_run=True)
    print(format_type_result(result))


def main():
    if not TARGET_DIR.is_dir():
        print(f"대상 디렉토리가 없습니다: {TARGET_DIR}")
        return

    # 사용자 정의 불용어 추가, 토큰 그룹은 최대 5개
    config = SorterConfig(
        ignore_tokens=SorterConfig().ignore_tokens | {"copy", "final"},
        max_groups=5,
    )
    sorter = DirSorter(config)

    try:
        example_1_auto_detect(sorter)
        example_2_explicit_match(sorter)
        example_3_by_type(sorter)
    finally:
        sorter.finalize()


if __name__ == "__main__":
    main()
