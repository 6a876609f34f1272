"""
파일 유형 분류 모듈: 확장자 기반 카테고리 분류 및 위험 확장자 필터링
"""

from typing import AbstractSet, Dict, List, Mapping, Sequence, Tuple

from .config import OTHER_CATEGORY, TYPE_DISPLAY_ORDER
from .grouping import Group
from .scanner import FileEntry


class TypeClassifier:
    """확장자 -> 카테고리 분류 클래스"""

    def __init__(self, file_types: Mapping[str, Sequence[str]],
                 dangerous_extensions: AbstractSet[str] = frozenset()):
        """
        Args:
            file_types: 카테고리 -> 확장자 리스트
            dangerous_extensions: 이동하지 않을 확장자 (소문자, 점 포함)
        """
        self.dangerous_extensions = {e.lower() for e in dangerous_extensions}

        # 확장자가 여러 카테고리에 있으면 나중 카테고리가 우선
        self.ext_to_type: Dict[str, str] = {}
        for category, extensions in file_types.items():
            for ext in extensions:
                self.ext_to_type[ext.lower()] = category

    def classify(self, entry: FileEntry) -> str:
        """파일의 카테고리 (모르는 확장자는 Other)"""
        return self.ext_to_type.get(entry.suffix, OTHER_CATEGORY)

    def is_dangerous(self, entry: FileEntry) -> bool:
        """위험 확장자 여부"""
        return bool(entry.suffix) and entry.suffix in self.dangerous_extensions

    def group_by_type(self, entries: Sequence[FileEntry]) -> Tuple[List[Group], List[FileEntry]]:
        """
        이동용 카테고리 그룹 생성

        Args:
            entries: 스캔된 파일 리스트

        Returns:
            (처음 등장 순서의 그룹 리스트, 위험 확장자로 제외된 파일 리스트)
        """
        groups: Dict[str, Group] = {}
        dangerous = []

        for entry in entries:
            if self.is_dangerous(entry):
                dangerous.append(entry)
                continue

            category = self.classify(entry)
            if category not in groups:
                groups[category] = Group(label=category)
            groups[category].files.append(entry)

        return list(groups.values()), dangerous

    def list_by_type(self, entries: Sequence[FileEntry]) -> Dict[str, List[FileEntry]]:
        """
        목록 출력용 카테고리별 파일 묶음

        표시 순서: 주요 카테고리 -> 나머지 카테고리(사전순) -> Other

        Args:
            entries: 스캔된 파일 리스트

        Returns:
            카테고리 -> 파일 리스트 (빈 카테고리 제외)
        """
        grouped: Dict[str, List[FileEntry]] = {}
        for entry in entries:
            grouped.setdefault(self.classify(entry), []).append(entry)

        order = [c for c in TYPE_DISPLAY_ORDER if c in grouped]
        order += sorted(c for c in grouped if c not in order and c != OTHER_CATEGORY)
        if OTHER_CATEGORY in grouped:
            order.append(OTHER_CATEGORY)

        return {category: grouped[category] for category in order}
