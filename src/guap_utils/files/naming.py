"""
Module: files.naming

Purpose:
    Filename helpers: extensions, base names, human-readable sizes and
    timestamped unique names. Paths may use either / or \\ separators.
"""

from __future__ import annotations

import re
from typing import Any

from guap_utils.dates import get_timestamp

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

_SEPARATORS = re.compile(r"[/\\]")


def get_name(filepath: Any) -> str:
    """
    Last path component.

    Example:
        >>> get_name("C:\\\\docs\\\\report.pdf")
        'report.pdf'
    """
    if not filepath or not isinstance(filepath, str):
        return ""
    return _SEPARATORS.split(filepath)[-1]


def get_ext(filename: Any) -> str:
    """
    Lowercase extension without the dot, "" if there is none.

    Only the last path component is inspected, so ``"v1.2/readme"`` has
    no extension.

    Example:
        >>> get_ext("photo.JPG")
        'jpg'
        >>> get_ext("archive.tar.gz")
        'gz'
    """
    name = get_name(filename)
    parts = name.split(".")
    return parts[-1].lower() if len(parts) > 1 else ""


def get_name_no_ext(filepath: Any) -> str:
    """
    Base name with the last extension removed.

    Dotfiles such as ``.env`` keep their full name.
    """
    name = get_name(filepath)
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def format_size(size_bytes: Any, decimals: int = 2) -> str:
    """
    Format a byte count with 1024-based units.

    Trailing zeros are dropped ("1.5 KB", "1 MB").

    Args:
        size_bytes: Number of bytes
        decimals: Maximum decimal places (negative treated as 0)

    Returns:
        Formatted size; "0 Bytes" for zero, negative or non-numeric input.

    Example:
        >>> format_size(1536)
        '1.5 KB'
    """
    if (
        isinstance(size_bytes, bool)
        or not isinstance(size_bytes, (int, float))
        or size_bytes != size_bytes
        or size_bytes <= 0
    ):
        return "0 Bytes"

    places = max(0, int(decimals))
    # log(x) / log(1024) is inexact at exact powers of 1024
    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1

    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"


def gen_unique_name(filename: Any) -> str:
    """
    Append the current millisecond timestamp to a file name.

    Example:
        ``"report.pdf"`` -> ``"report_1705312200000.pdf"``
    """
    if not filename or not isinstance(filename, str):
        return ""
    ext = get_ext(filename)
    stem = get_name_no_ext(filename)
    stamp = get_timestamp()
    return f"{stem}_{stamp}.{ext}" if ext else f"{stem}_{stamp}"
