"""
CLI 인터페이스 모듈: 명령줄 인터페이스 및 사용자 상호작용
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import __version__
from .config import SorterConfig, MATCH_MODE_TOKEN
from .config_loader import load_config
from .logger import create_session_logger
from .organizer import (
    DirSorter,
    format_move_report,
    format_auto_detect_result,
    format_type_result,
)
from .scanner import FileEntry


def print_banner():
    """프로그램 배너 출력"""
    print("=" * 60)
    print(f"  폴더 정리 도구 (dirsort) v{__version__}")
    print("=" * 60)


def print_section(title: str):
    """섹션 헤더 출력"""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print('='*60)


def prompt_user(message: str, choices: List[str] = None, default: str = None) -> str:
    """
    사용자 입력 프롬프트

    Args:
        message: 표시할 메시지
        choices: 선택지 리스트
        default: 기본값

    Returns:
        사용자 입력
    """
    text = message
    if choices:
        text = f"{message} [{'/'.join(choices)}]"
    if default:
        text = f"{text} (기본: {default})"

    while True:
        response = input(f"{text}: ").strip()

        if not response and default is not None:
            return default

        if choices and response.lower() not in [c.lower() for c in choices]:
            print(f"  잘못된 선택입니다. {choices} 중에서 선택하세요.")
            continue

        return response


def print_listing(listing: Dict[str, List[FileEntry]]):
    """카테고리별 파일 목록 출력"""
    total = sum(len(files) for files in listing.values())
    if total == 0:
        print("이 폴더에는 파일이 없습니다.")
        return

    for category, files in listing.items():
        print(f"-- {category} --")
        for entry in files:
            print(f"  {entry.name:<60} ({entry.suffix or '-'})")
        print("")

    print("-" * 60)
    print(f"전체 파일: {total}개")


def run_by_name(sorter: DirSorter, target_dir: Path, name: str, dry_run: bool):
    """이름 기반 정리 (검색어가 비어 있으면 자동 감지)"""
    if name and name.strip():
        print_section(f"이름 정리: '{name}'")
        report = sorter.organize_by_explicit_match(target_dir, name, dry_run=dry_run)
        print(format_move_report(report))
    else:
        print_section("이름 정리: 공통 토큰 자동 감지")
        result = sorter.organize_by_auto_detect(target_dir, dry_run=dry_run)
        print(format_auto_detect_result(result))


def run_by_type(sorter: DirSorter, target_dir: Path, dry_run: bool):
    """유형 기반 정리"""
    print_section("유형 정리")
    result = sorter.organize_by_type(target_dir, dry_run=dry_run)
    print(format_type_result(result))


def ask_directory(current: Optional[Path]) -> Optional[Path]:
    """
    대상 폴더 입력 (엔터는 현재 폴더)

    Returns:
        유효한 폴더 경로 또는 None
    """
    default = str(current or Path.cwd())
    answer = prompt_user("대상 폴더 경로", default=default)
    path = Path(answer).expanduser()
    if not path.is_dir():
        print(f"오류: 폴더가 아닙니다: {path}")
        return None
    return path.resolve()


def interactive_menu(sorter: DirSorter, target_dir: Optional[Path], dry_run: bool):
    """
    대화형 메뉴

    Args:
        sorter: DirSorter 인스턴스
        target_dir: 시작 대상 폴더 (None이면 입력 받음)
        dry_run: 드라이 런 여부
    """
    while True:
        print_section("작업 선택")
        print("  0. 종료")
        print("  1. 유형별 정리")
        print("  2. 이름별 정리")
        print("  3. 파일 목록 보기")
        option = prompt_user("선택", choices=["0", "1", "2", "3"])

        if option == "0":
            print("종료합니다.")
            return

        directory = ask_directory(target_dir)
        if directory is None:
            continue
        target_dir = directory

        if option == "1":
            run_by_type(sorter, target_dir, dry_run)
        elif option == "2":
            name = input("파일명에서 찾을 이름 (엔터: 공통 이름 자동 감지): ")
            run_by_name(sorter, target_dir, name, dry_run)
        else:
            print_section(f"파일 목록: {target_dir}")
            print_listing(sorter.list_by_type(target_dir))


def build_parser() -> argparse.ArgumentParser:
    """인자 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="dirsort",
        description="폴더 정리 도구 - 파일 유형 또는 파일명 패턴으로 하위 폴더 정리",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
    # 공통 이름 자동 감지 (미리보기)
    dirsort ~/Downloads --auto

    # 'invoice'가 들어간 파일을 invoice 폴더로 이동
    dirsort ~/Downloads --by-name invoice --execute

    # 파일 유형별 정리
    dirsort ~/Downloads --by-type --execute -y

    # 대화형 메뉴
    dirsort
        """
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--by-name",
        metavar="NAME",
        help="파일명에 NAME이 포함된 파일을 NAME 폴더로 이동"
    )
    mode_group.add_argument(
        "--auto",
        action="store_true",
        help="공통 이름 토큰을 자동 감지하여 정리"
    )
    mode_group.add_argument(
        "--by-type",
        action="store_true",
        help="파일 유형(확장자)별 정리"
    )
    mode_group.add_argument(
        "--list",
        action="store_true",
        help="유형별 파일 목록 출력"
    )

    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="정리 대상 폴더 (기본: 현재 폴더, 대화형 모드에서는 입력)"
    )
    parser.add_argument(
        "--execute",
        action="store_true",
        help="실제 실행 (기본은 드라이 런)"
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="확인 없이 실행"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML 설정 파일"
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="ignoreTokens.json / filetypes.json / dangerousExts.json 폴더 (기본: ./data)"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="로그 저장 위치 (기본: ~/_SortedFiles/logs)"
    )
    parser.add_argument(
        "--strict-tokens",
        action="store_true",
        help="자동 감지 시 어간이 토큰을 실제로 만든 파일만 그룹에 포함"
    )
    parser.add_argument(
        "--allow-overlap",
        action="store_true",
        help="자동 감지 시 한 파일을 여러 그룹 후보에 포함 (이전 동작)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="배너와 콘솔 로그 출력 생략"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def create_config(args: argparse.Namespace) -> SorterConfig:
    """
    인자로부터 설정 생성

    Args:
        args: 파싱된 인자

    Returns:
        SorterConfig 인스턴스
    """
    data_dir = Path(args.data_dir) if args.data_dir else Path("data")
    config_path = Path(args.config) if args.config else None

    config = load_config(config_path=config_path,
                         data_dir=data_dir if data_dir.is_dir() else None)

    config.dry_run = not args.execute
    if args.log_dir:
        config.log_dir = Path(args.log_dir).expanduser()
    if args.strict_tokens:
        config.match_mode = MATCH_MODE_TOKEN
    if args.allow_overlap:
        config.exclusive_groups = False
    return config


def run_cli(argv: List[str] = None) -> int:
    """
    CLI 실행

    Args:
        argv: 인자 리스트 (None이면 sys.argv)

    Returns:
        종료 코드
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = create_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"오류: 설정을 불러올 수 없습니다: {e}")
        return 1

    target_dir = Path(args.target).expanduser() if args.target else None
    interactive = not (args.by_name is not None or args.auto or args.by_type or args.list)

    if target_dir is None and not interactive:
        target_dir = Path.cwd()

    if target_dir is not None and not target_dir.is_dir():
        print(f"오류: 대상 폴더가 존재하지 않습니다: {target_dir}")
        return 1

    if not args.quiet:
        print_banner()
        if target_dir is not None:
            print(f"대상 폴더: {target_dir.resolve()}")
        print(f"드라이 런: {'예 (미리보기)' if config.dry_run else '아니오 (실제 실행)'}")

    if args.execute and not args.yes and not args.list:
        print("\n" + "!" * 60)
        print("  주의: 실제 실행 모드입니다!")
        print("!" * 60)
        confirm = input("\n계속하시겠습니까? (yes 입력): ").strip()
        if confirm.lower() != "yes":
            print("취소되었습니다.")
            return 0

    logger = create_session_logger(config.log_dir, console=not args.quiet)
    sorter = DirSorter(config, logger)

    try:
        if interactive:
            interactive_menu(sorter, target_dir, config.dry_run)
        elif args.list:
            print_section(f"파일 목록: {target_dir}")
            print_listing(sorter.list_by_type(target_dir))
        elif args.by_type:
            run_by_type(sorter, target_dir, config.dry_run)
        elif args.auto:
            run_by_name(sorter, target_dir, "", config.dry_run)
        else:
            run_by_name(sorter, target_dir, args.by_name, config.dry_run)

    except KeyboardInterrupt:
        print("\n\n사용자에 의해 중단되었습니다.")

    except ValueError as e:
        print(f"\n오류: {e}")
        logger.error("입력 오류", error=str(e))
        return 1

    finally:
        sorter.finalize()
        if not args.quiet:
            stats = logger.get_statistics()
            log_paths = logger.get_log_paths()
            print(f"\n로그 저장 위치: {log_paths['text_log']}")
            if stats["errors"]:
                print(f"오류 {len(stats['errors'])}건이 기록되었습니다.")

    if config.dry_run and not args.list:
        print("\n" + "=" * 60)
        print("이것은 미리보기입니다.")
        print("실제 실행하려면 --execute 옵션을 사용하세요.")
        print("=" * 60)

    return 0


def main():
    """엔트리 포인트"""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
