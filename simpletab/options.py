"""Option header parsing: ``[time=6/8; fidelity=8]``."""

from __future__ import annotations

import logging
import re
from typing import Any, Final

from simpletab.errors import ConfigError, TabSyntaxError
from simpletab.tab_models import Configuration

logger = logging.getLogger(__name__)

_TIME_PATTERN: Final = re.compile(r"^([0-9]+)\s*/\s*([0-9]+)$")
_FIDELITY_PATTERN: Final = re.compile(r"^[0-9]+$")


def _parse_time(value: str) -> dict[str, int]:
    match = _TIME_PATTERN.match(value)
    if not match:
        raise ConfigError(
            f"time signature '{value}' is malformed; expected 'n/n' with whole numbers"
        )
    return {"beats_per_measure": int(match.group(1)), "beat_unit": int(match.group(2))}


def _parse_fidelity(value: str) -> dict[str, int]:
    if not _FIDELITY_PATTERN.match(value):
        raise ConfigError(f"fidelity '{value}' is not a whole number")
    return {"fidelity": int(value)}


_OPTION_PARSERS: Final = {
    "time": _parse_time,
    "fidelity": _parse_fidelity,
}


def parse_option_header(header: str) -> Configuration:
    """
    Build a Configuration from the text between the header brackets.

    Segments are separated by ``;`` and written as ``name=value``. Only
    ``time`` and ``fidelity`` are recognised; other names are logged and
    skipped so newer documents still compile.

    Raises:
        ConfigError: If a recognised value is malformed or out of range, or a
            segment has no ``=``.
    """
    values: dict[str, Any] = {}
    for segment in header.split(";"):
        segment = segment.strip()
        if not segment:
            continue

        name, separator, value = segment.partition("=")
        name = name.strip()
        if not separator:
            raise ConfigError(f"option '{name}' has not been set to a value")

        option_parser = _OPTION_PARSERS.get(name)
        if option_parser is None:
            logger.warning("Ignoring unknown option '%s'", name)
            continue
        values.update(option_parser(value.strip()))

    return Configuration(**values)


def parse_options(raw_text: str) -> tuple[Configuration, str]:
    """
    Split the optional option header from the rest of the document.

    The header is blanked out rather than removed: every character up to the
    closing ``]`` except newlines becomes a space, so line and column numbers
    reported by later stages still point into the original text.

    Returns:
        The parsed Configuration (defaults when there is no header) and the
        remaining text.

    Raises:
        TabSyntaxError: If the header is never closed with ``]``.
        ConfigError: If an option value is malformed.
    """
    body = raw_text.lstrip()
    if not body.startswith("["):
        return Configuration(), raw_text

    start = len(raw_text) - len(body)
    end = raw_text.find("]", start)
    if end == -1:
        line = raw_text.count("\n", 0, start) + 1
        column = start - raw_text.rfind("\n", 0, start)
        raise TabSyntaxError(
            "unterminated option header; close it with ']'", line=line, column=column
        )

    header = raw_text[start + 1:end]
    try:
        configuration = parse_option_header(header)
    except ConfigError as exc:
        exc.line = raw_text.count("\n", 0, start) + 1
        raise

    logger.debug(
        "Options: time=%s fidelity=%d", configuration.time_signature, configuration.fidelity
    )
    blanked = re.sub(r"[^\n]", " ", raw_text[:end + 1])
    return configuration, blanked + raw_text[end + 1:]
