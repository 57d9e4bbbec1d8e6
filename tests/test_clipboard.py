from __future__ import annotations

import pyperclip
import pytest

from adapters.clipboard import PyperclipClipboard
from core.domain.errors import ClipboardError


def test_copy_writes_through_pyperclip(monkeypatch: pytest.MonkeyPatch) -> None:
    copied: list[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    PyperclipClipboard().copy("Burnt Orange")

    assert copied == ["Burnt Orange"]


def test_missing_clipboard_mechanism_is_clipboard_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_copy(text: str) -> None:
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", broken_copy)

    with pytest.raises(ClipboardError, match="clipboard"):
        PyperclipClipboard().copy("Burnt Orange")
