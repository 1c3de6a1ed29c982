"""
Module: validation

Purpose:
    Format checks for common form inputs. Every check returns a bool
    and never raises; wrong types simply fail validation.

Key Functions:
    - is_phone(): Mainland China mobile number
    - is_email(): Basic email address shape
    - is_url(): http/https links
    - is_id_card(): 18-digit mainland China resident ID format
    - is_numeric(): Numbers and numeric strings
    - is_empty(): None, "" and empty collections
    - to_empty_string(): None -> ""
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sized
from typing import Any
from urllib.parse import urlsplit

PHONE_PATTERN = re.compile(r"^1[3-9]\d{9}$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
ID_CARD_PATTERN = re.compile(
    r"^[1-9]\d{5}(18|19|20)\d{2}(0[1-9]|1[0-2])(0[1-9]|[12]\d|3[01])\d{3}[\dXx]$"
)
# Scheme-less links such as "www.example.com/path"
BARE_URL_PATTERN = re.compile(r"^(https?://)?([\da-z.-]+)\.([a-z.]{2,6})[/\w .-]*/?$")

_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def is_phone(phone: Any) -> bool:
    """
    Mainland China mobile number: 11 digits starting 13-19.

    Example:
        >>> is_phone("13812345678")
        True
        >>> is_phone(12812345678)
        False
    """
    if not phone or isinstance(phone, bool):
        return False
    return PHONE_PATTERN.match(str(phone)) is not None


def is_email(email: Any) -> bool:
    """Basic ``local@domain.tld`` check; surrounding whitespace is ignored."""
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_url(url: Any) -> bool:
    """
    True for http/https URLs with a host.

    Strings with another scheme (ftp://, mailto:...) are rejected.
    Strings without a scheme are accepted when they look like a host
    name with a dotted domain, e.g. ``www.example.com/page``.
    """
    if not url or not isinstance(url, str):
        return False

    if _SCHEME_PATTERN.match(url):
        try:
            parts = urlsplit(url)
        except ValueError:
            return False
        return parts.scheme.lower() in ("http", "https") and bool(parts.netloc)

    return BARE_URL_PATTERN.match(url.strip()) is not None


def to_empty_string(value: Any) -> Any:
    """Return "" for None, otherwise the value unchanged."""
    return "" if value is None else value


def is_id_card(id_card: Any) -> bool:
    """
    18-character mainland China resident ID number format.

    Checks region prefix, birth date ranges and the final digit/X; the
    checksum is not verified.
    """
    if not id_card or not isinstance(id_card, str):
        return False
    return ID_CARD_PATTERN.match(id_card.strip()) is not None


def is_numeric(value: Any) -> bool:
    """
    True for finite-or-infinite numbers and strings that parse as one.

    Bools, NaN, None and empty strings are not numeric.

    Example:
        >>> is_numeric(" 3.14 ")
        True
        >>> is_numeric("12abc")
        False
    """
    if value is None or isinstance(value, bool) or value == "":
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return False
        return not math.isnan(number)
    return False


def is_empty(value: Any) -> bool:
    """
    True for None, "" and empty lists, tuples, sets and mappings.

    Numbers (including 0) and False are not empty.
    """
    if value is None or value == "":
        return True
    if isinstance(value, str):
        return False
    if isinstance(value, (Mapping, Sized)):
        return len(value) == 0
    return False
