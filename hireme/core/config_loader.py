import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any, List

from hireme.core.config import settings
from hireme.core.logger import logger

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_MAX_PHOTOS = 3


def _resolve_path(path: str) -> Path:
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = PROJECT_ROOT / candidate
    return candidate


def load_marketplace_config(path: str = None) -> Dict[str, Any]:
    """
    Loads the marketplace catalog (suggested categories, photo limits) from JSON.
    Raises FileNotFoundError if the file is missing, ValueError if it is not valid JSON.
    """
    config_path = _resolve_path(path or settings.MARKETPLACE_CONFIG_PATH)
    if not config_path.exists():
        logger.critical(f"❌ Marketplace config '{config_path}' not found")
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Invalid JSON in marketplace config: {e}")
        raise ValueError(f"Invalid JSON in config file: {e}")

    logger.info(f"✅ Marketplace config loaded ({len(config.get('categories', []))} categories)")
    return config


@lru_cache(maxsize=1)
def get_marketplace_config() -> Dict[str, Any]:
    """Marketplace config from the configured path, read once per process."""
    return load_marketplace_config()


def get_categories(config: Dict[str, Any]) -> List[str]:
    return list(config.get("categories", []))


def get_max_photos(config: Dict[str, Any]) -> int:
    return int(config.get("max_service_photos", DEFAULT_MAX_PHOTOS))
