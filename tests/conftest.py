from __future__ import annotations

import pytest

from core.domain.errors import ClipboardError
from core.domain.models import ColorQueryResult, RGBValue


class FakeResolver:
    def __init__(self, result: ColorQueryResult | None = None, error: Exception | None = None) -> None:
        self.result = result or ColorQueryResult(name="Burnt Orange", exact_match=True)
        self.error = error
        self.calls: list[RGBValue] = []

    def resolve(self, color: RGBValue) -> ColorQueryResult:
        self.calls.append(color)
        if self.error is not None:
            raise self.error
        return self.result


class FakeClipboard:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.contents: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("no clipboard mechanism available")
        self.contents.append(text)


class RecordingSink:
    def __init__(self) -> None:
        self.emitted: list[ColorQueryResult] = []

    def emit(self, result: ColorQueryResult) -> None:
        self.emitted.append(result)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for var in ("COLOR_NAMER_API_BASE_URL", "COLOR_NAMER_HTTP_TIMEOUT_SECONDS", "COLOR_NAMER_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
