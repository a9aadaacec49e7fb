"""Tests for locating the Saved Objects directory."""

from pathlib import Path

import pytest

from shrekdeck.tts.paths import SAVED_OBJECTS, default_tts_dir, get_tts_dir


class TestDefaultTtsDir:
    @pytest.mark.parametrize(
        "platform, parent",
        [
            ("win32", Path("Documents") / "My Games"),
            ("darwin", Path("Library")),
            ("linux", Path(".local") / "share"),
        ],
    )
    def test_per_platform(self, platform: str, parent: Path) -> None:
        home = Path("/home/shrek")

        assert default_tts_dir(platform, home) == home / parent / SAVED_OBJECTS

    def test_ends_in_saved_objects(self) -> None:
        assert default_tts_dir("linux", Path("/h")).name == "Saved Objects"


class TestGetTtsDir:
    def test_environment_override(self, tts_dir) -> None:
        assert get_tts_dir() == tts_dir

    def test_missing_override(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("SHREKDECK_TTS_DIR", str(tmp_path / "nowhere"))

        assert get_tts_dir() is None

    def test_override_must_be_directory(self, tmp_path, monkeypatch) -> None:
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("", encoding="utf-8")
        monkeypatch.setenv("SHREKDECK_TTS_DIR", str(not_a_dir))

        assert get_tts_dir() is None

    def test_platform_default(self, tmp_path, monkeypatch) -> None:
        monkeypatch.delenv("SHREKDECK_TTS_DIR", raising=False)
        monkeypatch.setattr("shrekdeck.tts.paths.default_tts_dir", lambda: tmp_path)

        assert get_tts_dir() == tmp_path

    def test_not_cached(self, tmp_path, monkeypatch) -> None:
        target = tmp_path / "Saved Objects"
        monkeypatch.setenv("SHREKDECK_TTS_DIR", str(target))
        assert get_tts_dir() is None

        target.mkdir()

        assert get_tts_dir() == target
