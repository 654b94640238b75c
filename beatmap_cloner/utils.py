# beatmap_cloner/utils.py

import logging
from pathlib import Path
from typing import Optional

BACKGROUND_PREFIXES = ("0,0,", "Background,")


def setup_logging(log_file: Optional[Path] = None, level=logging.INFO):
    """
    Sets up a basic logging configuration for the application.

    Logs to both console (INFO level) and optionally to a file (DEBUG level).
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            root_logger.addHandler(file_handler)

    logging.info("Logging setup complete.")


def scrape(text: str, start: str, end: str) -> str:
    """
    Returns the trimmed text between the first `start` marker and the first
    `end` marker after it, or an empty string if either marker is missing.
    """
    start_idx = text.find(start)
    if start_idx == -1:
        return ""
    value_start = start_idx + len(start)
    end_idx = text.find(end, value_start)
    if end_idx == -1:
        return ""
    return text[value_start:end_idx].strip()


def detect_line_ending(text: str) -> str:
    """A chart containing any CRLF is treated as a CRLF chart."""
    return "\r\n" if "\r\n" in text else "\n"


def sanitize_title(title: str) -> str:
    """Makes a title safe to use as part of a folder name."""
    safe = "".join(c if c.isalnum() or c == " " else "_" for c in title)
    return safe.replace(" ", "_")


def find_background(text: str) -> Optional[str]:
    """Returns the quoted filename of the first background event, if any."""
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed.startswith(BACKGROUND_PREFIXES):
            continue
        start = trimmed.find('"')
        if start == -1:
            continue
        end = trimmed.find('"', start + 1)
        if end == -1:
            continue
        return trimmed[start + 1:end]
    return None
