"""
설정 모듈: 애플리케이션 전역 설정 및 기본값 정의
"""

from pathlib import Path
from typing import Dict, FrozenSet, List, Set
from dataclasses import dataclass, field


# 토큰 자동 감지에서 제외할 기본 불용어 (너무 일반적인 단어들)
DEFAULT_IGNORE_TOKENS = frozenset({
    "official", "lyrics", "video", "audio", "hd", "remix", "mv", "live",
    "youtube", "ft", "feat", "2025", "720p", "1080", "1080p", "best", "song",
    "songs", "360p", "featuring", "www", "com", "net", "org", "sample",
    "256k", "season", "episode", "lyric", "music",
})


# 파일 유형별 확장자 매핑 (카테고리 -> 확장자 리스트)
DEFAULT_FILE_TYPES: Dict[str, List[str]] = {
    "Images": [".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp", ".heic",
               ".heif", ".svg", ".ico", ".jfif", ".raw", ".arw", ".cr2", ".nef",
               ".orf", ".dng"],
    "Videos": [".mp4", ".mov", ".avi", ".mkv", ".wmv", ".flv", ".webm", ".mpeg",
               ".mpg", ".3gp", ".m4v", ".mts", ".vob"],
    "Audio": [".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a", ".opus",
              ".aiff", ".mid", ".midi"],
    "Documents": [".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".csv", ".xlsx",
                  ".xls", ".ppt", ".pptx", ".epub", ".md", ".tex", ".pages",
                  ".numbers", ".key", ".hwp", ".hwpx"],
    "Archives": [".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".dmg",
                 ".tgz", ".cab"],
    "Code": [".py", ".js", ".html", ".css", ".c", ".cpp", ".h", ".hpp", ".java",
             ".sh", ".ts", ".php", ".rb", ".go", ".swift", ".kt", ".rs", ".lua",
             ".sql", ".json", ".xml", ".yml", ".yaml", ".cs", ".vb", ".pl",
             ".asm", ".bat", ".cmd"],
    "Fonts": [".ttf", ".otf", ".woff", ".woff2", ".eot", ".fon"],
    "3D_Models": [".obj", ".fbx", ".stl", ".blend", ".3ds", ".dae", ".ply",
                  ".gltf", ".glb"],
    "Subtitles": [".srt", ".vtt", ".ass", ".ssa", ".sub"],
    "Configs": [".ini", ".cfg", ".conf", ".jsonc", ".toml", ".env", ".properties"],
    "DiskImages": [".iso", ".img", ".vhd", ".vhdx", ".vdi", ".vmdk"],
    "Packages": [".deb", ".rpm", ".apk", ".jar", ".whl", ".gem", ".msi"],
    "Other": [],
}

# 매핑에 없는 확장자가 들어갈 카테고리
OTHER_CATEGORY = "Other"

# 목록 출력 시 카테고리 표시 순서
TYPE_DISPLAY_ORDER = ["Images", "Videos", "Audio", "Documents", "Archives", "Code"]


# 자동 이동하면 위험한 확장자 (실행 파일, 스크립트, 매크로 문서)
DEFAULT_DANGEROUS_EXTENSIONS = frozenset({
    ".exe", ".dll", ".com", ".msi", ".bin", ".sys",
    ".bat", ".cmd", ".vbs", ".js", ".jse", ".wsf", ".wsh",
    ".ps1", ".psm1", ".sh", ".bash", ".zsh",
    ".lnk", ".inf", ".msu", ".msp",
    ".docm", ".xlsm", ".pptm",
    ".scr", ".pif", ".jar", ".reg",
})


# 자동 감지 그룹 소속 판정 방식
MATCH_MODE_FILENAME = "filename"  # 파일명에 토큰이 부분 문자열로 포함되면 소속
MATCH_MODE_TOKEN = "token"        # 파일명 어간이 해당 토큰을 실제로 생성한 경우만 소속
MATCH_MODES = (MATCH_MODE_FILENAME, MATCH_MODE_TOKEN)


@dataclass
class SorterConfig:
    """파일 정리 도구 설정 클래스"""

    # 토큰화에서 제외할 단어 (소문자)
    ignore_tokens: FrozenSet[str] = field(default_factory=lambda: DEFAULT_IGNORE_TOKENS)

    # 카테고리 -> 확장자 리스트
    file_types: Dict[str, List[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_FILE_TYPES.items()}
    )

    # 유형별 정리에서 건너뛸 확장자 (소문자, 점 포함)
    dangerous_extensions: Set[str] = field(
        default_factory=lambda: set(DEFAULT_DANGEROUS_EXTENSIONS)
    )

    # 토큰 최소 길이
    min_token_length: int = 4

    # 그룹을 만들기 위한 최소 파일 수
    min_group_size: int = 2

    # 자동 감지 시 만들 최대 그룹(토큰) 수
    max_groups: int = 10

    # 자동 감지 그룹 소속 판정 방식 ('filename' 또는 'token')
    match_mode: str = MATCH_MODE_FILENAME

    # True면 상위 순위 그룹에 들어간 파일은 하위 그룹 후보에서 제외
    exclusive_groups: bool = True

    # 드라이 런 모드 (실제 파일 이동 없이 미리보기)
    dry_run: bool = True

    # 로그 저장 디렉토리
    log_dir: Path = field(default=None)

    def __post_init__(self):
        """초기화 후 처리"""
        if self.log_dir is None:
            self.log_dir = Path.home() / "_SortedFiles" / "logs"

        self.ignore_tokens = frozenset(t.lower() for t in self.ignore_tokens)
        self.dangerous_extensions = {e.lower() for e in self.dangerous_extensions}

        if self.match_mode not in MATCH_MODES:
            raise ValueError(
                f"match_mode는 {MATCH_MODES} 중 하나여야 합니다: {self.match_mode}"
            )
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length는 1 이상이어야 합니다: {self.min_token_length}")
        if self.min_group_size < 1:
            raise ValueError(f"min_group_size는 1 이상이어야 합니다: {self.min_group_size}")
        if self.max_groups < 0:
            raise ValueError(f"max_groups는 0 이상이어야 합니다: {self.max_groups}")
