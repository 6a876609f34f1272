"""
메인 애플리케이션 모듈: 이름 기반/유형 기반 정리를 통합한 DirSorter 클래스
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from .config import SorterConfig
from .scanner import FileEntry, scan_directory
from .tokenizer import count_tokens, rank_tokens
from .grouping import Group, resolve_explicit_group, resolve_auto_groups
from .classifier import TypeClassifier
from .file_mover import FileMover, MoveReport
from .logger import SorterLogger, create_session_logger


REASON_DANGEROUS = "dangerous extension"


@dataclass
class AutoDetectResult:
    """자동 감지 정리 결과"""
    ranked_tokens: List[Tuple[str, int]] = field(default_factory=list)
    groups: List[Tuple[str, MoveReport]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def no_tokens_detected(self) -> bool:
        """2개 이상 파일에서 나온 토큰이 하나도 없음"""
        return not self.ranked_tokens

    @property
    def moved_count(self) -> int:
        return sum(report.moved_count for _, report in self.groups)

    @property
    def skipped_count(self) -> int:
        return sum(report.skipped_count for _, report in self.groups)


@dataclass
class TypeResult:
    """유형별 정리 결과"""
    groups: List[Tuple[str, MoveReport]] = field(default_factory=list)
    dangerous: List[FileEntry] = field(default_factory=list)
    dry_run: bool = False

    @property
    def moved_count(self) -> int:
        return sum(report.moved_count for _, report in self.groups)

    @property
    def skipped_count(self) -> int:
        return len(self.dangerous) + sum(report.skipped_count for _, report in self.groups)

    @property
    def skipped(self) -> List[Tuple[str, str]]:
        """(파일명, 사유) 리스트"""
        items = [(entry.name, REASON_DANGEROUS) for entry in self.dangerous]
        for _, report in self.groups:
            items.extend(report.skipped)
        return items


class DirSorter:
    """
    폴더 정리 통합 클래스

    검색어 일치, 토큰 자동 감지, 파일 유형 세 가지 방식으로
    폴더 바로 아래 파일들을 하위 폴더로 옮긴다.
    """

    def __init__(self, config: SorterConfig = None, logger: SorterLogger = None):
        """
        Args:
            config: 설정 객체 (None이면 기본 설정 사용)
            logger: 로거 객체 (None이면 config.log_dir에 자동 생성)
        """
        self.config = config or SorterConfig()
        self.logger = logger or create_session_logger(self.config.log_dir)

        self.classifier = TypeClassifier(self.config.file_types,
                                         self.config.dangerous_extensions)
        self.file_mover = FileMover(self.logger)

        # 마지막 스캔 결과
        self._scanned_files: List[FileEntry] = []

    def scan(self, directory: Path) -> List[FileEntry]:
        """
        대상 폴더 스캔 (한 번 실행에 한 번만)

        Args:
            directory: 대상 폴더

        Returns:
            FileEntry 리스트
        """
        self._scanned_files = scan_directory(directory)
        self.logger.info("폴더 스캔 완료",
                         details={"path": str(directory), "files": len(self._scanned_files)})
        return self._scanned_files

    def _dry_run(self, dry_run: Optional[bool]) -> bool:
        return self.config.dry_run if dry_run is None else dry_run

    def _move_groups(self, groups: List[Group], directory: Path,
                     dry_run: bool) -> List[Tuple[str, MoveReport]]:
        """그룹을 순서대로 이동 (그룹 실패는 다음 그룹에 영향 없음)"""
        results = []
        self.file_mover.start_run()
        for group in groups:
            self.logger.log_group_found(group.label, [e.name for e in group.files])
            report = self.file_mover.move_group(group, directory, dry_run=dry_run)
            if report.error:
                self.logger.error("그룹 폴더 생성 실패",
                                  source=str(report.destination_dir), error=report.error)
            results.append((group.label, report))
        return results

    def organize_by_explicit_match(self, directory: Path, substring: str,
                                   dry_run: bool = None) -> MoveReport:
        """
        검색어가 파일명에 포함된 파일들을 검색어 이름의 폴더로 이동

        Args:
            directory: 대상 폴더
            substring: 검색어 (대소문자 무시)
            dry_run: 드라이 런 여부 (None이면 config 설정 사용)

        Returns:
            MoveReport (일치 파일이 없으면 no_match=True)
        """
        dry_run = self._dry_run(dry_run)
        directory = Path(directory).resolve()
        entries = self.scan(directory)

        group = resolve_explicit_group(entries, substring)
        if group is None:
            self.logger.info("일치하는 파일 없음", details={"substring": substring})
            return MoveReport(label=substring, no_match=True, dry_run=dry_run)

        _, report = self._move_groups([group], directory, dry_run)[0]
        self.logger.log_summary({
            "mode": "explicit",
            "label": substring,
            "moved": report.moved_count,
            "skipped": report.skipped_count,
            "dry_run": dry_run,
        })
        return report

    def detect_groups(self, entries: List[FileEntry]) -> Tuple[List[Tuple[str, int]], List[Group]]:
        """
        토큰 빈도를 세고 순위 토큰별 그룹 결정 (파일 이동 없음)

        Args:
            entries: 스캔된 파일 리스트

        Returns:
            (순위 토큰 리스트, 그룹 리스트)
        """
        config = self.config
        frequency = count_tokens(entries, config.ignore_tokens, config.min_token_length)
        ranked = rank_tokens(frequency, min_count=config.min_group_size,
                             limit=config.max_groups)
        self.logger.log_token_ranking(ranked)

        groups = resolve_auto_groups(
            entries,
            ranked,
            ignore=config.ignore_tokens,
            min_group_size=config.min_group_size,
            match_mode=config.match_mode,
            exclusive=config.exclusive_groups,
            min_length=config.min_token_length,
        )
        return ranked, groups

    def organize_by_auto_detect(self, directory: Path,
                                dry_run: bool = None) -> AutoDetectResult:
        """
        공통 토큰을 자동 감지하여 토큰 이름의 폴더들로 이동

        Args:
            directory: 대상 폴더
            dry_run: 드라이 런 여부 (None이면 config 설정 사용)

        Returns:
            AutoDetectResult (순위 순서의 그룹별 MoveReport)
        """
        dry_run = self._dry_run(dry_run)
        directory = Path(directory).resolve()
        entries = self.scan(directory)

        ranked, groups = self.detect_groups(entries)
        result = AutoDetectResult(ranked_tokens=ranked, dry_run=dry_run)

        if result.no_tokens_detected:
            self.logger.info("공통 토큰 없음", details={"files": len(entries)})
            return result

        result.groups = self._move_groups(groups, directory, dry_run)
        self.logger.log_summary({
            "mode": "auto",
            "tokens": len(ranked),
            "groups": len(result.groups),
            "moved": result.moved_count,
            "skipped": result.skipped_count,
            "dry_run": dry_run,
        })
        return result

    def organize_by_type(self, directory: Path, dry_run: bool = None) -> TypeResult:
        """
        확장자 카테고리별 폴더로 이동 (위험 확장자는 건너뜀)

        Args:
            directory: 대상 폴더
            dry_run: 드라이 런 여부 (None이면 config 설정 사용)

        Returns:
            TypeResult
        """
        dry_run = self._dry_run(dry_run)
        directory = Path(directory).resolve()
        entries = self.scan(directory)

        groups, dangerous = self.classifier.group_by_type(entries)
        for entry in dangerous:
            self.logger.warning("위험 확장자 파일 건너뜀", source=entry.name)

        result = TypeResult(dangerous=dangerous, dry_run=dry_run)
        result.groups = self._move_groups(groups, directory, dry_run)
        self.logger.log_summary({
            "mode": "type",
            "groups": len(result.groups),
            "moved": result.moved_count,
            "skipped": result.skipped_count,
            "dry_run": dry_run,
        })
        return result

    def list_by_type(self, directory: Path) -> Dict[str, List[FileEntry]]:
        """카테고리별 파일 목록"""
        return self.classifier.list_by_type(self.scan(directory))

    def finalize(self):
        """세션 종료 및 리소스 정리"""
        self.logger.finalize()


def _format_skipped(lines: List[str], skipped: List[Tuple[str, str]]):
    if skipped:
        lines.append("건너뛴 파일 (이름 충돌 또는 오류):")
        for name, reason in skipped:
            lines.append(f"  - {name} ({reason})")


def format_move_report(report: MoveReport) -> str:
    """
    검색어 정리 결과 보고서

    Args:
        report: MoveReport

    Returns:
        포맷된 보고서
    """
    if report.no_match:
        return f"'{report.label}'이(가) 포함된 파일이 없습니다."

    moved_word = "이동 예정" if report.dry_run else "이동"
    lines = [f"[{report.label}] -> {report.destination_dir}"]
    if report.error:
        lines.append(f"  폴더 생성 실패: {report.error}")
    lines.append(f"{moved_word}: {report.moved_count}개  건너뜀: {report.skipped_count}개")
    _format_skipped(lines, report.skipped)
    return "\n".join(lines)


def format_auto_detect_result(result: AutoDetectResult) -> str:
    """
    자동 감지 정리 결과 보고서

    Args:
        result: AutoDetectResult

    Returns:
        포맷된 보고서
    """
    if result.no_tokens_detected:
        return "공통 이름 토큰이 감지되지 않았습니다. 이동할 파일이 없습니다."

    lines = ["감지된 토큰: " + ", ".join(f"{t}({c})" for t, c in result.ranked_tokens)]
    if not result.groups:
        lines.append("2개 이상의 파일로 묶이는 그룹이 없습니다.")

    skipped = []
    for label, report in result.groups:
        lines.append(f"  [{label}] {report.moved_count}개 / 건너뜀 {report.skipped_count}개")
        if report.error:
            lines.append(f"    폴더 생성 실패: {report.error}")
        skipped.extend(report.skipped)

    moved_word = "이동 예정" if result.dry_run else "이동"
    lines.append(f"{moved_word}: {result.moved_count}개  건너뜀: {result.skipped_count}개")
    _format_skipped(lines, skipped)
    return "\n".join(lines)


def format_type_result(result: TypeResult) -> str:
    """
    유형별 정리 결과 보고서

    Args:
        result: TypeResult

    Returns:
        포맷된 보고서
    """
    lines = []
    for label, report in result.groups:
        lines.append(f"  [{label}] {report.moved_count}개 / 건너뜀 {report.skipped_count}개")

    moved_word = "이동 예정" if result.dry_run else "이동"
    lines.append(f"{moved_word}: {result.moved_count}개  건너뜀: {result.skipped_count}개")
    _format_skipped(lines, result.skipped)
    return "\n".join(lines)
