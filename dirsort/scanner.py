"""
디렉토리 스캔 모듈: 대상 폴더 바로 아래의 일반 파일 목록 수집
"""

from pathlib import Path
from typing import List
from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """스캔 시점의 파일 정보 (실행 중 다시 스캔하지 않음)"""
    path: Path

    @property
    def name(self) -> str:
        """확장자 포함 파일명"""
        return self.path.name

    @property
    def stem(self) -> str:
        """확장자 제외 파일명"""
        return self.path.stem

    @property
    def suffix(self) -> str:
        """소문자 확장자 (점 포함)"""
        return self.path.suffix.lower()


def scan_directory(directory: Path) -> List[FileEntry]:
    """
    폴더 바로 아래의 일반 파일 스캔 (하위 폴더는 재귀하지 않음)

    Args:
        directory: 대상 폴더

    Returns:
        파일명 순으로 정렬된 FileEntry 리스트
    """
    directory = Path(directory).resolve()

    if not directory.exists():
        raise FileNotFoundError(f"대상 폴더가 존재하지 않습니다: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"폴더가 아닙니다: {directory}")

    entries = []
    for item in directory.iterdir():
        try:
            if item.is_file():
                entries.append(FileEntry(path=item))
        except OSError:
            continue

    return sorted(entries, key=lambda e: e.name)
