"""Locate Tabletop Simulator's Saved Objects directory."""

import logging
import sys
from pathlib import Path
from typing import Optional

from shrekdeck.config import get_settings

logger = logging.getLogger(__name__)

SAVED_OBJECTS = Path("Tabletop Simulator") / "Saves" / "Saved Objects"


def default_tts_dir(platform: Optional[str] = None, home: Optional[Path] = None) -> Path:
    """Where the simulator keeps saved objects on this platform."""
    platform = platform or sys.platform
    home = home or Path.home()

    if platform.startswith("win"):
        return home / "Documents" / "My Games" / SAVED_OBJECTS
    if platform == "darwin":
        return home / "Library" / SAVED_OBJECTS
    return home / ".local" / "share" / SAVED_OBJECTS


def get_tts_dir() -> Optional[Path]:
    """Return the Saved Objects directory, or None if it does not exist.

    ``SHREKDECK_TTS_DIR`` overrides the platform default. Looked up on
    every call.
    """
    candidate = get_settings().tabletop_dir or default_tts_dir()
    if candidate.is_dir():
        logger.debug(f"Tabletop Simulator directory: {candidate}")
        return candidate
    logger.debug(f"Tabletop Simulator directory not found at {candidate}")
    return None
