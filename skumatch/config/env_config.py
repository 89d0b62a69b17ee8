"""
Environment configuration loader for the SKU match service
Loads settings from the environment and an optional .env file
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    Load environment variables from a .env file.
    Variables already present in the environment win over the file.

    Args:
        env_path: Path to .env file (default: .env in project root)

    Returns:
        True if a file was found and loaded
    """
    path = Path(env_path) if env_path else PROJECT_ROOT / '.env'

    if not path.exists():
        logger.debug("No .env file found", extra={"path": str(path)})
        return False

    loaded = load_dotenv(path, override=False)
    logger.debug("Loaded .env file", extra={"path": str(path)})
    return loaded


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer in environment, using default",
                       extra={"key": name, "value": raw, "default": default})
        return default


def get_matcher_config() -> Dict[str, Any]:
    """
    Get matcher and API configuration from the environment

    Returns:
        Dictionary with service configuration
    """
    load_env_file()

    config = {
        'catalog_path': os.getenv('SKU_CATALOG_PATH') or None,
        'preload_index': _env_flag('PRELOAD_SKU_INDEX'),
        'ocr_match_rate_limit': os.getenv('OCR_MATCH_RATE_LIMIT', '60/minute;600/hour'),
        'audit_max_entries': _env_int('AUDIT_MAX_ENTRIES', 1000),
        'frontend_origin': os.getenv('FRONTEND_ORIGIN', '*'),
        'environment': os.getenv('ENVIRONMENT', 'development').lower(),
        'debug_mode': _env_flag('DEBUG_MODE'),
    }

    return config


if __name__ == "__main__":
    logger.info("Environment configuration loaded", extra={"config": get_matcher_config()})
