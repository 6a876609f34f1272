"""
폴더 정리 도구 - 핵심 모듈

제공 기능:
- SorterConfig: 설정 클래스
- DirSorter: 통합 정리 클래스 (검색어 / 토큰 자동 감지 / 파일 유형)
- TypeClassifier: 확장자 기반 분류
- FileMover: 덮어쓰기 없는 파일 이동
"""

from .config import SorterConfig
from .organizer import DirSorter, AutoDetectResult, TypeResult
from .classifier import TypeClassifier
from .file_mover import FileMover, MoveReport, MoveStatus

__version__ = "1.0.0"

__all__ = [
    'SorterConfig',
    'DirSorter',
    'AutoDetectResult',
    'TypeResult',
    'TypeClassifier',
    'FileMover',
    'MoveReport',
    'MoveStatus',
]
