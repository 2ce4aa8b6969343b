"""Best-effort copy of the summary to the host clipboard.

The clipboard belongs to the host (a browser tab, a desktop session), so
the caller supplies the async ``writer``.  A failing writer never raises
out of ``copy_summary``; it becomes a status the user can read.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Literal

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], Awaitable[None]]

COPY_SUCCESS_MESSAGE = "Summary copied. Paste in WhatsApp."
COPY_FAILURE_MESSAGE = "Unable to copy automatically. Please copy manually."


class CopyStatus(BaseModel):
    state: Literal["idle", "copied", "failed"] = "idle"
    message: str = ""

    @property
    def copied(self) -> bool:
        return self.state == "copied"


async def copy_summary(text: str, writer: ClipboardWriter) -> CopyStatus:
    """Hand ``text`` to the clipboard writer and report how it went."""
    if not text:
        return CopyStatus()
    try:
        await writer(text)
    except Exception:
        logger.warning("Clipboard write failed", exc_info=True)
        return CopyStatus(state="failed", message=COPY_FAILURE_MESSAGE)
    return CopyStatus(state="copied", message=COPY_SUCCESS_MESSAGE)


class ClipboardUnconfirmed(RuntimeError):
    """The host cannot report whether text reached the clipboard."""


async def unconfirmed_writer(text: str) -> None:
    """Writer for hosts with no clipboard result channel.

    A Streamlit server cannot learn the outcome of a browser-side
    ``navigator.clipboard.writeText`` call, so it never claims success;
    the user copies from the displayed summary instead.
    """
    raise ClipboardUnconfirmed("clipboard outcome is not observable from this host")
