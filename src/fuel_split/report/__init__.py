"""Report — number display, shareable summary, clipboard hand-off."""

from fuel_split.report.formatting import format_number
from fuel_split.report.summary import build_summary_text, read_summary_figures
from fuel_split.report.clipboard import (
    COPY_FAILURE_MESSAGE,
    COPY_SUCCESS_MESSAGE,
    ClipboardWriter,
    ClipboardUnconfirmed,
    CopyStatus,
    copy_summary,
    unconfirmed_writer,
)

__all__ = [
    "format_number",
    "build_summary_text",
    "read_summary_figures",
    "COPY_FAILURE_MESSAGE",
    "COPY_SUCCESS_MESSAGE",
    "ClipboardWriter",
    "ClipboardUnconfirmed",
    "CopyStatus",
    "copy_summary",
    "unconfirmed_writer",
]
