"""
Write save documents to disk.

Two targets:
  - an arbitrary path, overwritten if it exists
  - the simulator's Saved Objects directory, with a ``.png`` thumbnail
    of the same base name next to the ``.json``

Writes go through a temporary file in the destination directory, so a
failure never leaves a truncated file behind. A replaced file keeps its
permissions. The ``.json``/``.png`` pair is written together: if the
thumbnail cannot be moved into place, the ``.json`` is rolled back.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from PIL import Image

from shrekdeck.errors import SinkError, TabletopDirNotFound
from shrekdeck.tts.paths import get_tts_dir
from shrekdeck.tts.save import SaveState
from shrekdeck.tts.thumbnail import ThumbnailStyle, png_bytes, render_thumbnail

logger = logging.getLogger(__name__)


def render_save(save: SaveState) -> str:
    """Pretty-printed JSON text of a save document."""
    return json.dumps(save.to_dict(), indent=2, ensure_ascii=False)


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass


def _file_mode(path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_temp(path: Path, data: bytes) -> str:
    """Write ``data`` to a temporary file beside ``path`` and return its name."""
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise SinkError(f"Could not write {path}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, _file_mode(path))
    except OSError as e:
        _discard(tmp_name)
        raise SinkError(f"Could not write {path}: {e}") from e
    return tmp_name


def _commit(tmp_name: str, path: Path) -> None:
    try:
        os.replace(tmp_name, path)
    except OSError as e:
        _discard(tmp_name)
        raise SinkError(f"Could not write {path}: {e}") from e


def _atomic_write(path: Path, data: bytes) -> None:
    _commit(_write_temp(path, data), path)


def _restore(path: Path, previous: Optional[bytes]) -> None:
    """Put ``path`` back the way it was before a failed write."""
    try:
        if previous is None:
            path.unlink(missing_ok=True)
        else:
            _atomic_write(path, previous)
    except (OSError, SinkError) as e:
        logger.error(f"Could not roll back {path}: {e}")


def write_save(save: SaveState, path: Path) -> Path:
    """Write ``save`` to ``path``, replacing any existing file."""
    path = Path(path)
    _atomic_write(path, render_save(save).encode("utf-8"))
    logger.info(f"Wrote save file {path}")
    return path


def tabletop_target(output: Path, tabletop_dir: Path) -> Path:
    """Resolve ``output`` inside the Saved Objects directory, ending in .json."""
    target = tabletop_dir / output
    if target.suffix.lower() != ".json":
        target = target.with_name(target.name + ".json")
    return target


def write_to_tabletop(
    save: SaveState,
    output: Path,
    thumbnail: Optional[Image.Image] = None,
    style: ThumbnailStyle = ThumbnailStyle.CARD,
    tabletop_dir: Optional[Path] = None,
) -> tuple[Path, Path]:
    """Write ``save`` and its thumbnail into the Saved Objects directory.

    Args:
        save: Document to write
        output: Path relative to the Saved Objects directory
        thumbnail: Image to use; a stock one in ``style`` is drawn if None
        style: Stock thumbnail style
        tabletop_dir: Saved Objects directory (looked up if None)

    Returns:
        (json_path, png_path)
    """
    base = tabletop_dir or get_tts_dir()
    if base is None:
        raise TabletopDirNotFound()

    json_path = tabletop_target(Path(output), base)
    png_path = json_path.with_suffix(".png")

    contents = render_save(save).encode("utf-8")
    image = png_bytes(thumbnail if thumbnail is not None else render_thumbnail(style))

    try:
        json_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SinkError(f"Could not create {json_path.parent}: {e}") from e

    # Both files are staged before either is moved into place
    json_tmp = _write_temp(json_path, contents)
    try:
        png_tmp = _write_temp(png_path, image)
    except SinkError:
        _discard(json_tmp)
        raise

    try:
        previous = json_path.read_bytes()
    except FileNotFoundError:
        previous = None
    except OSError as e:
        _discard(json_tmp)
        _discard(png_tmp)
        raise SinkError(f"Could not write {json_path}: {e}") from e

    try:
        _commit(json_tmp, json_path)
    except SinkError:
        _discard(png_tmp)
        raise
    logger.info(f"Wrote save file {json_path}")

    try:
        _commit(png_tmp, png_path)
    except SinkError:
        _restore(json_path, previous)
        raise
    logger.info(f"Wrote thumbnail {png_path}")
    return json_path, png_path
