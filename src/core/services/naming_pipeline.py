"""Color naming orchestration.

The CLI only collects raw option values and renders errors; the steps
themselves (choose input -> parse -> resolve -> emit) live here so they can be
driven from tests with fake resolvers and sinks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.errors import UsageError
from core.domain.models import ColorQueryResult, RGBValue
from core.interfaces.color_resolver import ColorResolver
from core.interfaces.output import ResultSink
from core.services.color_parser import parse_hex, parse_rgb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRequest:
    """Raw values of `--hex` / `--rgb` as typed by the user."""

    hex: str | None = None
    rgb: str | None = None


@dataclass(frozen=True)
class NamingResult:
    """Output of a pipeline invocation."""

    color: RGBValue
    query: ColorQueryResult


def select_color(request: NameRequest) -> RGBValue:
    """Check that exactly one notation was given and parse it.

    Raises `UsageError` before any parsing when both or neither are set.
    """

    if request.hex is not None and request.rgb is not None:
        raise UsageError("Options --hex and --rgb are mutually exclusive; give only one.")
    if request.hex is None and request.rgb is None:
        raise UsageError("One of --hex or --rgb is required.")

    if request.hex is not None:
        return parse_hex(request.hex)
    return parse_rgb(request.rgb)  # type: ignore[arg-type]


def run_naming(
    request: NameRequest,
    *,
    resolver: ColorResolver,
    sink: ResultSink,
) -> NamingResult:
    color = select_color(request)
    logger.debug("Parsed color %s (rgb=%s)", color.to_hex(), color.as_query())

    query = resolver.resolve(color)
    logger.debug("Resolved %s -> %r (exact=%s)", color.to_hex(), query.name, query.exact_match)

    sink.emit(query)
    return NamingResult(color=color, query=query)
