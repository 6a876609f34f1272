"""
설정 파일 로더: YAML 설정 파일과 JSON 데이터 파일(불용어, 파일 유형, 위험 확장자)
"""

import json
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List, FrozenSet, Set

from .config import (
    SorterConfig,
    DEFAULT_IGNORE_TOKENS,
    DEFAULT_FILE_TYPES,
    DEFAULT_DANGEROUS_EXTENSIONS,
)


logger = logging.getLogger(__name__)

IGNORE_TOKENS_FILE = "ignoreTokens.json"
FILE_TYPES_FILE = "filetypes.json"
DANGEROUS_EXTS_FILE = "dangerousExts.json"


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    YAML 설정 파일 로드

    Args:
        config_path: YAML 파일 경로

    Returns:
        설정 딕셔너리
    """
    if not config_path.exists():
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_data = yaml.safe_load(f)

    return config_data or {}


def expand_path(path_str: str) -> Path:
    """경로 확장 (~/ 처리)"""
    return Path(path_str).expanduser().resolve()


def _read_json(path: Path) -> Optional[Any]:
    """JSON 파일 읽기 (없거나 깨졌으면 None)"""
    if not path.exists():
        logger.info(f"{path.name} 파일이 없어 기본값을 사용합니다.")
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"{path.name} 읽기 실패, 기본값을 사용합니다: {e}")
        return None


def _string_list(value: Any) -> Optional[List[str]]:
    """문자열 리스트인지 확인"""
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    return None


def load_ignore_tokens(path: Path) -> FrozenSet[str]:
    """
    불용어 JSON 로드: {"ignoreTokens": ["official", ...]}

    Args:
        path: JSON 파일 경로

    Returns:
        소문자 불용어 집합 (실패 시 기본값)
    """
    data = _read_json(path)
    if data is None:
        return DEFAULT_IGNORE_TOKENS

    tokens = _string_list(data.get("ignoreTokens")) if isinstance(data, dict) else None
    if tokens is None:
        logger.warning(f"{path.name} 형식이 올바르지 않아 기본 불용어를 사용합니다.")
        return DEFAULT_IGNORE_TOKENS

    return frozenset(t.lower() for t in tokens)


def load_file_types(path: Path) -> Dict[str, List[str]]:
    """
    파일 유형 JSON 로드: {"Images": [".jpg", ".png"], ...}

    Args:
        path: JSON 파일 경로

    Returns:
        카테고리 -> 확장자 리스트 (실패 시 기본값)
    """
    data = _read_json(path)
    fallback = {k: list(v) for k, v in DEFAULT_FILE_TYPES.items()}
    if data is None:
        return fallback

    if not isinstance(data, dict):
        logger.warning(f"{path.name} 형식이 올바르지 않아 기본 파일 유형을 사용합니다.")
        return fallback

    result = {}
    for category, extensions in data.items():
        extensions = _string_list(extensions)
        if extensions is None:
            logger.warning(f"{path.name} 형식이 올바르지 않아 기본 파일 유형을 사용합니다.")
            return fallback
        result[category] = [e.lower() for e in extensions]

    return result


def load_dangerous_extensions(path: Path) -> Set[str]:
    """
    위험 확장자 JSON 로드: {"dangerousExtensions": [".exe", ...]}

    Args:
        path: JSON 파일 경로

    Returns:
        소문자 확장자 집합 (실패 시 기본값)
    """
    data = _read_json(path)
    if data is None:
        return set(DEFAULT_DANGEROUS_EXTENSIONS)

    extensions = _string_list(data.get("dangerousExtensions")) if isinstance(data, dict) else None
    if extensions is None:
        logger.warning(f"{path.name} 형식이 올바르지 않아 기본 위험 확장자를 사용합니다.")
        return set(DEFAULT_DANGEROUS_EXTENSIONS)

    return {e.lower() for e in extensions}


def apply_yaml_overrides(config: SorterConfig, data: Dict[str, Any]) -> SorterConfig:
    """
    YAML 딕셔너리 값을 설정에 반영

    Args:
        config: 기준 설정
        data: YAML에서 읽은 딕셔너리

    Returns:
        새 SorterConfig 인스턴스
    """
    values = {
        'ignore_tokens': config.ignore_tokens,
        'file_types': config.file_types,
        'dangerous_extensions': config.dangerous_extensions,
        'min_token_length': config.min_token_length,
        'min_group_size': config.min_group_size,
        'max_groups': config.max_groups,
        'match_mode': config.match_mode,
        'exclusive_groups': config.exclusive_groups,
        'dry_run': config.dry_run,
        'log_dir': config.log_dir,
    }

    if 'ignore_tokens' in data:
        values['ignore_tokens'] = frozenset(data['ignore_tokens'] or [])
    if data.get('extra_ignore_tokens'):
        values['ignore_tokens'] = frozenset(values['ignore_tokens']) | frozenset(
            data['extra_ignore_tokens']
        )
    if 'file_types' in data:
        values['file_types'] = {
            k: [e.lower() for e in (v or [])] for k, v in data['file_types'].items()
        }
    if 'dangerous_extensions' in data:
        values['dangerous_extensions'] = set(data['dangerous_extensions'] or [])

    # 자동 감지 옵션
    detection = data.get('auto_detect', {}) or {}
    for key in ('min_token_length', 'min_group_size', 'max_groups',
                'match_mode', 'exclusive_groups'):
        if key in detection:
            values[key] = detection[key]

    if 'dry_run' in data:
        values['dry_run'] = bool(data['dry_run'])
    if data.get('log_dir'):
        values['log_dir'] = expand_path(data['log_dir'])

    return SorterConfig(**values)


def create_config_from_yaml(yaml_path: Path, base: SorterConfig = None) -> SorterConfig:
    """
    YAML 파일에서 SorterConfig 생성

    Args:
        yaml_path: YAML 설정 파일 경로
        base: 기준 설정 (None이면 기본 설정)

    Returns:
        SorterConfig 인스턴스
    """
    data = load_yaml_config(yaml_path)
    return apply_yaml_overrides(base or SorterConfig(), data)


def load_config(config_path: Optional[Path] = None,
                data_dir: Optional[Path] = None) -> SorterConfig:
    """
    기본값 -> JSON 데이터 파일 -> YAML 설정 순서로 설정 구성

    Args:
        config_path: YAML 설정 파일 경로 (None이면 생략)
        data_dir: JSON 데이터 파일 디렉토리 (None이면 생략)

    Returns:
        SorterConfig 인스턴스
    """
    config = SorterConfig()

    if data_dir is not None:
        data_dir = Path(data_dir)
        config = SorterConfig(
            ignore_tokens=load_ignore_tokens(data_dir / IGNORE_TOKENS_FILE),
            file_types=load_file_types(data_dir / FILE_TYPES_FILE),
            dangerous_extensions=load_dangerous_extensions(data_dir / DANGEROUS_EXTS_FILE),
        )

    if config_path is not None:
        config = create_config_from_yaml(Path(config_path), base=config)

    return config
