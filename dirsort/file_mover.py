"""
파일 이동 모듈: 그룹 폴더 생성 및 덮어쓰기 없는 안전한 파일 이동
"""

import os
import shutil
from pathlib import Path
from typing import List, Optional, Set, Tuple
from dataclasses import dataclass, field
from enum import Enum

from .grouping import Group
from .scanner import FileEntry


REASON_NAME_CONFLICT = "name conflict"


class MoveStatus(Enum):
    """파일별 처리 결과"""
    MOVED = "moved"
    PLANNED = "planned"  # 드라이 런에서 이동 예정
    SKIPPED_COLLISION = "skipped_collision"
    SKIPPED_ERROR = "skipped_error"


@dataclass
class MoveOutcome:
    """파일 하나의 이동 결과"""
    entry: FileEntry
    destination: Path
    status: MoveStatus
    reason: str = ""

    @property
    def skipped(self) -> bool:
        return self.status in (MoveStatus.SKIPPED_COLLISION, MoveStatus.SKIPPED_ERROR)


@dataclass
class MoveReport:
    """그룹 하나의 이동 결과"""
    label: str
    destination_dir: Optional[Path] = None
    outcomes: List[MoveOutcome] = field(default_factory=list)
    error: Optional[str] = None  # 폴더 생성 실패 등 그룹 단위 오류
    no_match: bool = False
    dry_run: bool = False

    @property
    def moved_count(self) -> int:
        """이동(또는 이동 예정) 파일 수"""
        return sum(1 for o in self.outcomes if not o.skipped)

    @property
    def skipped_count(self) -> int:
        """건너뛴 파일 수"""
        return sum(1 for o in self.outcomes if o.skipped)

    @property
    def skipped(self) -> List[Tuple[str, str]]:
        """(파일명, 사유) 리스트"""
        return [(o.entry.name, o.reason) for o in self.outcomes if o.skipped]

    def add(self, outcome: MoveOutcome):
        self.outcomes.append(outcome)


class FileMover:
    """그룹 단위 파일 이동 클래스"""

    def __init__(self, logger=None):
        self.logger = logger
        self._history: List[MoveOutcome] = []
        # 드라이 런 한 번에서 이미 이동 예정인 원본 경로
        self._planned: Set[Path] = set()

    def start_run(self):
        """새 실행 시작 (드라이 런 예정 목록 초기화)"""
        self._planned.clear()

    def _log(self, message: str, level: str = "INFO"):
        """로깅 헬퍼"""
        if self.logger:
            log_func = getattr(self.logger, level.lower(), self.logger.info)
            log_func(message)

    def _ensure_directory(self, path: Path) -> Optional[str]:
        """
        디렉토리 존재 확인 및 생성

        Args:
            path: 디렉토리 경로

        Returns:
            실패 사유 (성공하면 None)
        """
        try:
            path.mkdir(exist_ok=True)
            return None
        except (OSError, ValueError) as e:
            self._log(f"디렉토리 생성 실패: {path} - {e}", "ERROR")
            return str(e)

    def _move_file(self, source: Path, destination: Path):
        """
        파일 이동 (대상이 이미 있으면 덮어쓰지 않고 FileExistsError)

        Args:
            source: 원본 경로
            destination: 대상 경로
        """
        if os.path.lexists(destination):
            raise FileExistsError(f"대상 파일이 이미 존재합니다: {destination}")
        shutil.move(str(source), str(destination))

    def move_group(self, group: Group, base_dir: Path, dry_run: bool = False) -> MoveReport:
        """
        그룹 파일들을 base_dir/<그룹 폴더>로 이동

        단일 파일 실패는 건너뛰고 계속 진행한다.

        Args:
            group: 이동할 그룹
            base_dir: 그룹 폴더를 만들 상위 폴더 (스캔한 폴더)
            dry_run: True면 폴더 생성/이동 없이 결과만 계산

        Returns:
            MoveReport
        """
        dest_dir = Path(base_dir) / group.dir_name
        report = MoveReport(label=group.label, destination_dir=dest_dir, dry_run=dry_run)

        error = None
        if dry_run:
            if os.path.lexists(dest_dir) and not dest_dir.is_dir():
                error = f"폴더 자리에 같은 이름의 파일이 있습니다: {dest_dir}"
        elif not dest_dir.is_dir():
            error = self._ensure_directory(dest_dir)

        if error is not None:
            report.error = error
            for entry in group.files:
                report.add(MoveOutcome(
                    entry=entry,
                    destination=dest_dir / entry.name,
                    status=MoveStatus.SKIPPED_ERROR,
                    reason=f"폴더 생성 실패: {error}",
                ))
            return report

        for entry in group.files:
            outcome = self._move_entry(entry, dest_dir / entry.name, dry_run)
            report.add(outcome)
            self._history.append(outcome)

            if self.logger:
                self.logger.log_file_move(
                    str(entry.path), str(outcome.destination),
                    status=outcome.status.value, reason=outcome.reason
                )

        return report

    def _move_entry(self, entry: FileEntry, destination: Path, dry_run: bool) -> MoveOutcome:
        """파일 하나 처리"""
        if os.path.lexists(destination):
            return MoveOutcome(entry, destination, MoveStatus.SKIPPED_COLLISION,
                               REASON_NAME_CONFLICT)

        if dry_run:
            if entry.path in self._planned:
                return MoveOutcome(entry, destination, MoveStatus.SKIPPED_ERROR,
                                   f"이미 다른 그룹으로 이동 예정: {entry.path}")
            self._planned.add(entry.path)
            return MoveOutcome(entry, destination, MoveStatus.PLANNED)

        try:
            self._move_file(entry.path, destination)
        except FileExistsError:
            return MoveOutcome(entry, destination, MoveStatus.SKIPPED_COLLISION,
                               REASON_NAME_CONFLICT)
        except (shutil.Error, OSError, ValueError) as e:
            return MoveOutcome(entry, destination, MoveStatus.SKIPPED_ERROR, str(e))

        return MoveOutcome(entry, destination, MoveStatus.MOVED)

    def get_history(self) -> List[MoveOutcome]:
        """처리 이력 반환"""
        return self._history
