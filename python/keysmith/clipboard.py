"""
Clipboard integration for generated passwords.
"""

import logging
import threading
import time
from typing import Optional

import pyperclip

from .exceptions import ClipboardError


logger = logging.getLogger(__name__)

# Seconds before a copied password is wiped from the clipboard
CLEAR_AFTER = 60


def copy_to_clipboard(text: str, clear_after: int = CLEAR_AFTER) -> Optional[threading.Thread]:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy
        clear_after: Seconds until the clipboard is cleared; 0 disables clearing

    Returns:
        The daemon thread that will clear the clipboard, or None

    Raises:
        ClipboardError: No usable clipboard mechanism
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e

    if clear_after <= 0:
        return None

    def clear_clipboard() -> None:
        time.sleep(clear_after)
        try:
            # Only clear if the user hasn't copied something else meanwhile
            if pyperclip.paste() == text:
                pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            logger.debug("Clipboard auto-clear failed: %s", e)

    clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
    clear_thread.start()
    return clear_thread
