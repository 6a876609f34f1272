"""
그룹 결정 모듈: 검색어 또는 순위 토큰별로 이동할 파일 묶음 결정
"""

import os
from typing import AbstractSet, Dict, List, Optional, Sequence, Set, Tuple
from dataclasses import dataclass, field

from .config import MATCH_MODE_FILENAME, MATCH_MODE_TOKEN
from .scanner import FileEntry
from .tokenizer import stem_tokens, DEFAULT_MIN_LENGTH


_SEPARATORS = {'/', '\\', os.sep} | ({os.altsep} if os.altsep else set())


@dataclass
class Group:
    """폴더 하나로 이동할 파일 묶음"""
    label: str
    files: List[FileEntry] = field(default_factory=list)
    count: int = 0  # 토큰 빈도 (검색어 그룹은 0)

    @property
    def dir_name(self) -> str:
        """폴더 이름으로 쓸 수 있게 정리된 라벨"""
        return sanitize_label(self.label)

    @property
    def size(self) -> int:
        """파일 수"""
        return len(self.files)


def sanitize_label(label: str) -> str:
    """
    라벨을 안전한 폴더 이름으로 변환

    경로 구분자는 '_'로 바꾸고 '.', '..'은 밑줄로 바꿔
    대상 폴더 밖이나 중첩 폴더로 나가지 않게 한다.

    Args:
        label: 검색어 또는 토큰

    Returns:
        폴더 이름
    """
    name = "".join('_' if ch in _SEPARATORS else ch for ch in label)
    if name in ('.', '..'):
        name = '_' * len(name)
    return name


def resolve_explicit_group(entries: Sequence[FileEntry], substring: str) -> Optional[Group]:
    """
    검색어가 파일명에 포함된 파일들로 그룹 생성 (대소문자 무시)

    Args:
        entries: 스캔된 파일 리스트
        substring: 사용자 검색어

    Returns:
        Group 또는 None (일치 파일 없음)
    """
    if not substring or not substring.strip():
        raise ValueError("검색어가 비어 있습니다.")

    needle = substring.lower()
    matches = [e for e in entries if needle in e.name.lower()]

    if not matches:
        return None

    return Group(label=substring, files=matches)


def resolve_auto_groups(
    entries: Sequence[FileEntry],
    ranked: Sequence[Tuple[str, int]],
    ignore: AbstractSet[str] = frozenset(),
    min_group_size: int = 2,
    match_mode: str = MATCH_MODE_FILENAME,
    exclusive: bool = True,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> List[Group]:
    """
    순위 토큰별 그룹 결정

    Args:
        entries: 스캔된 파일 리스트 (한 번 찍은 스냅샷을 재사용)
        ranked: rank_tokens() 결과
        ignore: 불용어 집합 ('token' 모드에서 토큰 재계산용)
        min_group_size: 그룹 최소 파일 수 (미만이면 버림)
        match_mode: 'filename'이면 파일명 부분 문자열 일치,
                    'token'이면 어간이 해당 토큰을 만든 파일만
        exclusive: True면 앞 순위 그룹에 들어간 파일은 다시 넣지 않음
        min_length: 토큰 최소 길이

    Returns:
        순위 순서의 Group 리스트
    """
    tokens_by_entry: Dict[FileEntry, Set[str]] = {}
    if match_mode == MATCH_MODE_TOKEN:
        tokens_by_entry = {e: stem_tokens(e.stem, ignore, min_length) for e in entries}
    elif match_mode != MATCH_MODE_FILENAME:
        raise ValueError(f"알 수 없는 match_mode: {match_mode}")

    claimed: Set[FileEntry] = set()
    groups = []

    for token, count in ranked:
        if match_mode == MATCH_MODE_TOKEN:
            members = [e for e in entries if token in tokens_by_entry[e]]
        else:
            members = [e for e in entries if token in e.name.lower()]

        if exclusive:
            members = [e for e in members if e not in claimed]

        if len(members) < min_group_size:
            continue

        claimed.update(members)
        groups.append(Group(label=token, files=members, count=count))

    return groups
