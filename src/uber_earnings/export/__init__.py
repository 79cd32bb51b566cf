"""CSV export: row projection and streaming writer."""

from uber_earnings.export.rows import HEADER, OutputRow, project_activity
from uber_earnings.export.writer import CsvActivityWriter

__all__ = ["CsvActivityWriter", "HEADER", "OutputRow", "project_activity"]
