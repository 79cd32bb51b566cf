"""Streaming CSV sink for projected activity rows."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from types import TracebackType
from typing import TextIO

from uber_earnings.export.rows import HEADER

logger = logging.getLogger(__name__)


class CsvActivityWriter:
    """Writes the header and rows to an already-open text stream.

    The stream belongs to the caller: the writer flushes it on exit but
    never closes it. Open files with ``newline=""`` so the csv module
    controls line endings.

    Examples:
        >>> import io
        >>> buf = io.StringIO()
        >>> with CsvActivityWriter(buf) as out:
        ...     out.write_header()
        >>> buf.getvalue().splitlines()[0]
        'UUID,Type,Date,Time,Title,Total,Url,Tip,Duration,Distance,Pickup,DropOff,MapUrl'
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._writer = csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        self.header_written = False
        self.rows_written = 0

    def write_header(self) -> None:
        if self.header_written:
            return
        self._writer.writerow(HEADER)
        self.header_written = True

    def write_row(self, row: Iterable[str]) -> None:
        self._writer.writerow(row)
        self.rows_written += 1

    def flush(self) -> None:
        self.stream.flush()

    def __enter__(self) -> CsvActivityWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.flush()
        logger.debug("Flushed %d rows", self.rows_written)
