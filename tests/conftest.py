"""
Pytest 공용 fixture
"""

from pathlib import Path
from typing import Callable, Dict, List

import pytest

from dirsort.config import SorterConfig
from dirsort.logger import create_session_logger
from dirsort.organizer import DirSorter


@pytest.fixture
def target_dir(tmp_path) -> Path:
    """정리 대상 폴더"""
    path = tmp_path / "target"
    path.mkdir()
    return path


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """로그 폴더 (대상 폴더 밖)"""
    return tmp_path / "logs"


@pytest.fixture
def make_files(target_dir) -> Callable[..., List[Path]]:
    """대상 폴더에 파일 생성 (내용은 파일명)"""
    def _make(*names: str) -> List[Path]:
        paths = []
        for name in names:
            path = target_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(name, encoding="utf-8")
            paths.append(path)
        return paths
    return _make


@pytest.fixture
def make_sorter(log_dir) -> Callable[..., DirSorter]:
    """실제 실행 모드 DirSorter 생성기 (설정 값 덮어쓰기 가능)"""
    sorters = []

    def _make(**overrides) -> DirSorter:
        overrides.setdefault("dry_run", False)
        config = SorterConfig(log_dir=log_dir, **overrides)
        sorter = DirSorter(config, create_session_logger(log_dir, console=False))
        sorters.append(sorter)
        return sorter

    yield _make

    for sorter in sorters:
        sorter.finalize()


@pytest.fixture
def sorter(make_sorter) -> DirSorter:
    return make_sorter()


def snapshot_tree(root: Path) -> Dict[str, str]:
    """폴더 트리의 (상대 경로 -> 내용) 스냅샷"""
    return {
        str(p.relative_to(root)): p.read_text(encoding="utf-8")
        for p in root.rglob("*") if p.is_file()
    }
