"""Runtime configuration: environment, .env file and skin files."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from shrekdeck.cards.template import Skin
from shrekdeck.errors import SkinError

logger = logging.getLogger(__name__)

ENV_TTS_DIR = "SHREKDECK_TTS_DIR"
ENV_LOG_LEVEL = "SHREKDECK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    tabletop_dir: Optional[Path]
    log_level: str


def load_env(env_path: Optional[Path] = None) -> bool:
    """Load a .env file (default: ./.env). Existing variables win.

    Returns:
        True if a file was loaded
    """
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.exists():
        return False
    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return True


def get_settings() -> Settings:
    """Read settings from the environment. Not cached."""
    tts_dir = os.environ.get(ENV_TTS_DIR, "").strip()
    level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        level = DEFAULT_LOG_LEVEL
    return Settings(
        tabletop_dir=Path(tts_dir).expanduser() if tts_dir else None,
        log_level=level,
    )


def load_skin(path: Path) -> Skin:
    """Load a card skin from a YAML file.

    Raises:
        SkinError: if the file cannot be read or is not a valid skin
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SkinError(f"Could not read skin file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SkinError(f"Invalid YAML in skin file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SkinError(f"Skin file {path} must contain a mapping")

    skin = Skin.from_dict(data)
    logger.info(f"Loaded skin {skin.name!r} from {path}")
    return skin
