"""Single-pass scanner pairing shell functions with their comment blocks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

from .base import UnreadableSourceError
from .extractors import classify_line, collect_comment, extract_func_name
from .generators import format_record
from .models import FilterCriterion, FunctionRecord, LineKind

log = logging.getLogger(__name__)

Source = Union[str, Path]


class CommentScanner:
    """State machine over a stream of script lines.

    The scanner is IDLE or waiting for the "{" of a bare header seen on the
    previous line. Feed it lines in file order; every confirmed function that
    passes the filter comes back as a FunctionRecord.

    Example:
        scanner = CommentScanner(FilterCriterion(prefix="cmd_"))
        for line in lines:
            record = scanner.feed(line)
            if record:
                print(record.name)
    """

    def __init__(self, criterion: FilterCriterion | None = None):
        self.criterion = criterion or FilterCriterion()
        self._block = ""
        self._pending: str | None = None

    @property
    def awaiting_brace(self) -> bool:
        return self._pending is not None

    def feed(self, line: str) -> FunctionRecord | None:
        """Consume one source line.

        Args:
            line: Source line, with or without its line terminator

        Returns:
            The record completed by this line, or None
        """
        line = line.rstrip("\r\n")
        kind = classify_line(line)

        if self._pending is not None:
            header, self._pending = self._pending, None
            if kind is LineKind.OPEN_BRACE:
                return self._complete(header)
            # The line that broke the expectation is consumed here, not
            # classified again under IDLE.
            log.debug("No '{' after %r, discarding header", header)
            self._block = ""
            return None

        if kind is LineKind.COMMENT:
            self._block = collect_comment(self._block, line)
        elif kind is LineKind.INLINE_START:
            return self._complete(line)
        elif kind is LineKind.BARE_START:
            self._pending = line
        else:
            self._block = ""
        return None

    def finish(self) -> None:
        """Drop any state left at end of input."""
        if self._pending is not None:
            log.debug("Input ended before '{' of %r", self._pending)
        self._pending = None
        self._block = ""

    def _complete(self, header: str) -> FunctionRecord | None:
        """Resolve a confirmed header and apply the filter."""
        block, self._block = self._block, ""

        name = extract_func_name(header)
        if not name:
            log.debug("Unresolvable header %r", header)
            return None

        display = self.criterion.display_name(name)
        if display is None:
            log.debug("Filtered out %s", name)
            return None
        return FunctionRecord(name=display, comment=block)


def scan_lines(
    lines: Iterable[str], criterion: FilterCriterion | None = None
) -> Iterator[FunctionRecord]:
    """Yield a record for every confirmed, unfiltered function in lines."""
    scanner = CommentScanner(criterion)
    for line in lines:
        record = scanner.feed(line)
        if record is not None:
            yield record
    scanner.finish()


def read_lines(source: Source) -> Iterator[str]:
    """Yield the lines of a UTF-8 script file.

    Raises:
        UnreadableSourceError: If the file cannot be opened or decoded.
    """
    try:
        with open(source, encoding="utf-8") as f:
            yield from f
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableSourceError(str(source), str(e)) from e


def extract_all_comments(
    source: Source,
    target_name: str | None = None,
    *,
    prefix: str = "",
    out: TextIO | None = None,
) -> int:
    """Write every function in a script together with its comment block.

    Args:
        source: Path of the shell script
        target_name: Only emit the function with exactly this declared name
        prefix: Only emit functions carrying this prefix, shown without it
        out: Output stream (defaults to sys.stdout)

    Returns:
        Number of records written

    Raises:
        UnreadableSourceError: If the script cannot be read.
    """
    out = out if out is not None else sys.stdout
    criterion = FilterCriterion(target_name=target_name, prefix=prefix)

    count = 0
    for record in scan_lines(read_lines(source), criterion):
        out.write(format_record(record))
        count += 1
    log.debug("Extracted %d function(s) from %s", count, source)
    return count


def list_functions(source: Source, prefix: str = "") -> list[str]:
    """List the display names of the functions declared in a script."""
    criterion = FilterCriterion(prefix=prefix)
    return [record.name for record in scan_lines(read_lines(source), criterion)]
