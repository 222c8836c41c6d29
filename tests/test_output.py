"""Tests for file and clipboard output."""

import subprocess

import pytest

import banner_output
from banner_errors import BannerError, ClipboardError, InvalidInputError, OutputError
from banner_output import (
    copy_to_clipboard,
    ensure_dir,
    get_unique_filename,
    is_writable,
    read_from_clipboard,
    sanitize_filename,
    save_raw_text,
    save_to_file,
)
from banner_render import BannerResult


@pytest.fixture
def banner():
    return BannerResult(text="🔥  🔥\n🔥🔥🔥")


class TestSanitizeFilename:
    @pytest.mark.parametrize("raw,expected", [
        ("banner.txt", "banner.txt"),
        ("..hidden", "hidden"),
        ("a<b>c?.txt", "abc.txt"),
        ("  spaced.txt  ", "spaced.txt"),
        ("...", ""),
    ])
    def test_sanitize(self, raw, expected):
        assert sanitize_filename(raw) == expected


class TestSaveToFile:
    """Tests for save_to_file()."""

    def test_writes_banner(self, tmp_path, banner):
        path = save_to_file(banner, tmp_path / "out")

        assert path == (tmp_path / "out" / "banner.txt").resolve()
        assert path.read_text(encoding='utf-8') == banner.text

    def test_custom_filename(self, tmp_path, banner):
        path = save_to_file(banner, tmp_path, "slack.json")
        assert path.name == "slack.json"

    def test_empty_filename_rejected(self, tmp_path, banner):
        with pytest.raises(InvalidInputError):
            save_to_file(banner, tmp_path, "...")

    def test_traversal_rejected(self, tmp_path, banner):
        with pytest.raises(InvalidInputError):
            save_to_file(banner, tmp_path / "out", "../../evil.txt")

    def test_unwritable_directory(self, tmp_path, banner):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(OutputError) as excinfo:
            save_to_file(banner, blocker / "sub")
        assert isinstance(excinfo.value, BannerError)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_save_raw_text(self, tmp_path):
        path = save_raw_text("hello", tmp_path / "nested" / "raw.txt")
        assert path.read_text(encoding='utf-8') == "hello"


class TestDirectoryHelpers:
    def test_ensure_dir(self, tmp_path):
        target = ensure_dir(tmp_path / "a" / "b")
        assert target.is_dir()

    def test_is_writable(self, tmp_path):
        assert is_writable(tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_is_writable_missing_dir(self, tmp_path):
        assert not is_writable(tmp_path / "missing")

    def test_unique_filename(self, tmp_path):
        assert get_unique_filename(tmp_path, "banner", "txt") == "banner.txt"

        (tmp_path / "banner.txt").write_text("x")
        (tmp_path / "banner-1.txt").write_text("x")
        assert get_unique_filename(tmp_path, "banner", "txt") == "banner-2.txt"


class TestClipboard:
    """Tests for clipboard access with the platform tools patched out."""

    def test_empty_text_rejected(self):
        with pytest.raises(InvalidInputError):
            copy_to_clipboard("")

    def test_no_tool_available(self, monkeypatch):
        monkeypatch.setattr(banner_output.shutil, "which", lambda name: None)

        with pytest.raises(ClipboardError):
            copy_to_clipboard("🔥")

    def test_pipes_text_to_first_available_tool(self, monkeypatch):
        calls = []
        monkeypatch.setattr(banner_output.shutil, "which",
                            lambda name: "/usr/bin/xclip" if name == "xclip" else None)
        monkeypatch.setattr(banner_output.subprocess, "run",
                            lambda command, **kwargs: calls.append((command, kwargs)))

        copy_to_clipboard("🔥 hi")

        command, kwargs = calls[0]
        assert command == ['xclip', '-selection', 'clipboard']
        assert kwargs['input'] == "🔥 hi".encode('utf-8')

    def test_tool_failure(self, monkeypatch):
        def fail(command, **kwargs):
            raise subprocess.CalledProcessError(1, command)

        monkeypatch.setattr(banner_output.shutil, "which", lambda name: "/usr/bin/" + name)
        monkeypatch.setattr(banner_output.subprocess, "run", fail)

        with pytest.raises(ClipboardError):
            copy_to_clipboard("🔥")

    def test_read(self, monkeypatch):
        monkeypatch.setattr(banner_output.shutil, "which",
                            lambda name: "/usr/bin/pbpaste" if name == "pbpaste" else None)
        monkeypatch.setattr(
            banner_output.subprocess, "run",
            lambda command, **kwargs: subprocess.CompletedProcess(command, 0, "🔥".encode('utf-8'), b""))

        assert read_from_clipboard() == "🔥"
        assert banner_output.is_clipboard_available()

    def test_unavailable(self, monkeypatch):
        monkeypatch.setattr(banner_output.shutil, "which", lambda name: None)
        assert not banner_output.is_clipboard_available()
