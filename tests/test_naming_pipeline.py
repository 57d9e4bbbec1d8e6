from __future__ import annotations

import pytest

from conftest import FakeResolver
from core.domain.errors import InvalidFormat, InvalidNumber, NetworkError, UsageError
from core.domain.models import RGBValue
from core.services.naming_pipeline import NameRequest, run_naming, select_color


def test_select_color_dispatches_on_notation() -> None:
    assert select_color(NameRequest(hex="#ff0080")) == RGBValue(red=255, green=0, blue=128)
    assert select_color(NameRequest(rgb="rgb(10, 20, 30)")) == RGBValue(red=10, green=20, blue=30)


@pytest.mark.parametrize(
    "request_",
    [NameRequest(), NameRequest(hex="#fff", rgb="rgb(1,2,3)"), NameRequest(hex="", rgb="")],
)
def test_usage_error_before_any_lookup(request_: NameRequest, fake_resolver, recording_sink) -> None:
    with pytest.raises(UsageError):
        run_naming(request_, resolver=fake_resolver, sink=recording_sink)

    assert fake_resolver.calls == []
    assert recording_sink.emitted == []


def test_usage_error_exit_code_differs_from_runtime_errors() -> None:
    assert UsageError.exit_code == 2
    assert NetworkError.exit_code == 1


@pytest.mark.parametrize(
    ("request_", "error"),
    [
        (NameRequest(hex="xyz"), InvalidFormat),
        (NameRequest(rgb="rgb(10,20)"), InvalidFormat),
        (NameRequest(rgb="rgb(10,20,300)"), InvalidNumber),
    ],
)
def test_parse_errors_stop_before_lookup(request_, error, fake_resolver, recording_sink) -> None:
    with pytest.raises(error):
        run_naming(request_, resolver=fake_resolver, sink=recording_sink)

    assert fake_resolver.calls == []


def test_run_naming_resolves_and_emits(fake_resolver, recording_sink) -> None:
    result = run_naming(NameRequest(hex="f80"), resolver=fake_resolver, sink=recording_sink)

    assert fake_resolver.calls == [RGBValue(red=255, green=136, blue=0)]
    assert recording_sink.emitted == [result.query]
    assert result.query.name == "Burnt Orange"
    assert result.color.to_hex() == "#ff8800"


def test_resolver_failure_skips_output(recording_sink) -> None:
    resolver = FakeResolver(error=NetworkError("down"))
    with pytest.raises(NetworkError):
        run_naming(NameRequest(rgb="rgb(1,2,3)"), resolver=resolver, sink=recording_sink)

    assert recording_sink.emitted == []
