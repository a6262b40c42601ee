"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict, Optional
from functools import lru_cache

from src.core.config import settings
from src.core.logging import logger
from src.utils.text.matching.contextual import ContextualSynonymTable


def get_resource_path(relative_path: str) -> str:
    """프로젝트 루트 기준 리소스 절대 경로 반환"""
    # src/utils/resource_loader.py -> src/utils -> src -> root
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}
    
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_contextual_keywords(relative_path: Optional[str] = None) -> ContextualSynonymTable:
    """문맥 검색 키워드 테이블 로드

    파일이 없거나 비어 있으면 기본 테이블을 사용합니다.
    """
    data = load_yaml_resource(relative_path or settings.contextual_keywords_path)
    mapping = data.get("contextual_keywords") or {}
    if not isinstance(mapping, dict) or not mapping:
        logger.warning("Contextual keywords not configured, using defaults")
        return ContextualSynonymTable.default()

    table = ContextualSynonymTable.from_mapping(
        {keyword: terms or [] for keyword, terms in mapping.items()}
    )
    logger.info(f"Contextual keywords loaded: {len(table)} entries")
    return table
