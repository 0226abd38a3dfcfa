"""TabExporter: converts notation files into tablature text files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from simpletab.tab_renderers import RENDERERS, TabRenderer
from simpletab.track_resolver import parse

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Final[set[str]] = set(RENDERERS)


def default_output_path(input_path: str | Path, extension: str = ".txt") -> Path:
    """``song.tab`` becomes ``song-output.txt`` in the same directory."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}-output{extension}")


class TabExporter:
    """
    Convert simplified tab notation into tablature via a pluggable renderer.

    Supported formats:
    - ``plain``: frets and dashes only, one line per string.
    - ``labeled``: string names, bar lines and a beat counter.
    """

    def __init__(self, output_format: str = "plain") -> None:
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized)

    def _build_renderer(self, output_format: str) -> TabRenderer:
        return RENDERERS[output_format]()

    def convert(self, raw_text: str) -> str:
        """
        Parse notation text and render it.

        Raises:
            ParseError: If the notation is malformed; nothing is rendered.
        """
        document = parse(raw_text)
        logger.debug(
            "Rendering %d track(s) as %s tablature", len(document.tracks), self.output_format
        )
        return self.renderer.render(document)

    def read(self, input_path: str | Path) -> str:
        """
        Read a notation file as UTF-8.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with open(input_path, encoding="utf-8") as fh:
            return fh.read()

    def write(self, content: str, output_path: str | Path) -> None:
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.info("Wrote tablature to %s", output_path)

    def export(self, input_path: str | Path, output_path: str | Path) -> None:
        """
        Convert a notation file and write the tablature to disk.

        The output file is only opened once conversion has succeeded.

        Raises:
            ParseError: If the notation is malformed.
            OSError: If the input cannot be read or the output cannot be written.
            UnicodeDecodeError: If the input is not valid UTF-8.
        """
        content = self.convert(self.read(input_path))
        self.write(content, output_path)
