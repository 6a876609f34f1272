"""
파일명 토큰 모듈: 어간 토큰화, 토큰 빈도 집계, 토큰 순위 결정

자동 감지 모드에서 폴더 이름 후보가 될 토큰을 고른다.
    1. 어간을 영숫자가 아닌 문자 기준으로 나눠 길이 4 이상의 토큰 추출
    2. 어간 전체(소문자)도 후보 토큰으로 추가
    3. 불용어 제외 후 파일 단위로 중복 제거하여 빈도 집계
    4. 2개 이상 파일에서 나온 토큰을 빈도 내림차순, 같은 빈도는 사전순으로 정렬
"""

import re
from collections import Counter
from typing import AbstractSet, Iterable, Iterator, List, Set, Tuple

from .scanner import FileEntry


# 영숫자 연속 구간 (밑줄은 구분자로 취급)
_ALNUM_RUN = re.compile(r'[^\W_]+')

DEFAULT_MIN_LENGTH = 4
DEFAULT_MIN_COUNT = 2
DEFAULT_MAX_TOKENS = 10


def tokenize(stem: str, ignore: AbstractSet[str] = frozenset(),
             min_length: int = DEFAULT_MIN_LENGTH) -> Iterator[str]:
    """
    파일명 어간에서 후보 토큰 생성

    Args:
        stem: 확장자 제외 파일명
        ignore: 제외할 소문자 불용어 집합
        min_length: 토큰 최소 길이

    Yields:
        소문자 토큰 (어간 전체가 마지막에 한 번 더 나올 수 있음)
    """
    lower = stem.lower()

    for match in _ALNUM_RUN.finditer(lower):
        token = match.group()
        if len(token) >= min_length and token not in ignore:
            yield token

    if len(lower) >= min_length and lower not in ignore:
        yield lower


def stem_tokens(stem: str, ignore: AbstractSet[str] = frozenset(),
                min_length: int = DEFAULT_MIN_LENGTH) -> Set[str]:
    """파일 하나의 중복 제거된 토큰 집합"""
    return set(tokenize(stem, ignore, min_length))


def count_tokens(entries: Iterable[FileEntry], ignore: AbstractSet[str] = frozenset(),
                 min_length: int = DEFAULT_MIN_LENGTH) -> Counter:
    """
    전체 파일의 토큰 빈도 집계

    한 파일에서 같은 토큰이 여러 번 나와도 1회로 센다.

    Args:
        entries: 스캔된 파일 리스트
        ignore: 제외할 불용어 집합
        min_length: 토큰 최소 길이

    Returns:
        토큰 -> 해당 토큰을 만든 파일 수
    """
    frequency = Counter()
    for entry in entries:
        frequency.update(stem_tokens(entry.stem, ignore, min_length))
    return frequency


def rank_tokens(frequency: Counter, min_count: int = DEFAULT_MIN_COUNT,
                limit: int = DEFAULT_MAX_TOKENS) -> List[Tuple[str, int]]:
    """
    그룹으로 만들 토큰 선택

    Args:
        frequency: 토큰 빈도
        min_count: 최소 빈도 (이보다 적게 나온 토큰은 제외)
        limit: 최대 토큰 수

    Returns:
        (토큰, 빈도) 리스트, 빈도 내림차순 / 토큰 사전순
    """
    common = [(token, count) for token, count in frequency.items() if count >= min_count]
    common.sort(key=lambda item: (-item[1], item[0]))
    return common[:limit]
