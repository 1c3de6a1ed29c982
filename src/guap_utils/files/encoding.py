"""
Module: files.encoding

Purpose:
    Base64 / data URL conversion for file contents.

Key Classes:
    - Blob: Decoded bytes with a MIME type
    - NamedBlob: Blob with a file name, savable to disk
    - FileEncodingError: Raised for empty or malformed input

Key Functions:
    - calc_base64_size(): Decoded size of a base64 payload in MB
    - to_base64(): Path, bytes or binary file object -> data URL
    - to_blob(): data URL -> Blob
    - to_file(): data URL -> NamedBlob

Used By:
    - files.images: Decoding input for compression
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from guap_utils.dates import get_timestamp
from .mime import DEFAULT_MIME, get_mime

logger = logging.getLogger(__name__)

BytesSource = Union[str, os.PathLike, bytes, bytearray, memoryview, BinaryIO]

_MIME_PATTERN = re.compile(r":(.*?);")


class FileEncodingError(ValueError):
    """Raised when file data cannot be encoded or a data URL cannot be decoded."""

    def __init__(self, message: str, source: Any = None):
        super().__init__(message)
        self.source = source


@dataclass(frozen=True)
class Blob:
    """
    Binary payload with its MIME type.

    Attributes:
        data: Raw bytes
        type: MIME type, e.g. "image/png"
    """
    data: bytes
    type: str

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.type};base64,{payload}"


@dataclass(frozen=True)
class NamedBlob(Blob):
    """
    Blob carrying a file name and modification time (ms timestamp).
    """
    name: str = ""
    last_modified: int = field(default_factory=lambda: get_timestamp())

    def save(self, directory: Union[str, os.PathLike]) -> Path:
        """
        Write the payload to ``directory / name``.

        Returns:
            Path of the written file.
        """
        target = Path(directory) / self.name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.data)
        logger.debug("Saved %s (%d bytes)", target, self.size)
        return target


def _strip_prefix(data_url: str) -> str:
    if "," in data_url:
        return data_url.split(",")[1]
    return data_url


def calc_base64_size(data: Any) -> float:
    """
    Approximate decoded size of a base64 string, in megabytes.

    A ``data:...;base64,`` prefix is ignored.

    Returns:
        Size in MB (``len * 3 / 4`` bytes); 0 for empty or non-string input.
    """
    if not data or not isinstance(data, str):
        return 0
    payload = _strip_prefix(data)
    return (len(payload) * 3 / 4) / (1024 * 1024)


def _read_source(source: BytesSource) -> tuple[bytes, Optional[str]]:
    """Return (content, file name if known)."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source), None
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            return path.read_bytes(), path.name
        except OSError as exc:
            raise FileEncodingError(f"Cannot read file: {path}", source=source) from exc
    if hasattr(source, "read"):
        content = source.read()
        if isinstance(content, str):
            raise FileEncodingError("File object must be opened in binary mode", source=source)
        name = getattr(source, "name", None)
        return bytes(content), name if isinstance(name, str) else None
    raise FileEncodingError(f"Unsupported file source: {type(source).__name__}", source=source)


def to_base64(source: BytesSource, mime: Optional[str] = None) -> str:
    """
    Encode file contents as a data URL.

    Args:
        source: File path, raw bytes, or binary file object
        mime: MIME type; guessed from the file name when omitted

    Returns:
        ``data:<mime>;base64,<payload>``

    Raises:
        FileEncodingError: If source is empty, unreadable or unsupported.

    Example:
        >>> to_base64(b"hi", "text/plain")
        'data:text/plain;base64,aGk='
    """
    if source is None or (isinstance(source, (str, bytes, bytearray)) and not source):
        raise FileEncodingError("File must not be empty", source=source)

    content, name = _read_source(source)
    mime_type = mime or (get_mime(name) if name else DEFAULT_MIME)
    return Blob(content, mime_type).to_data_url()


def to_blob(data_url: Any) -> Blob:
    """
    Decode a data URL.

    Raises:
        FileEncodingError: If the string is empty, has no comma-separated
            payload, carries no MIME type, or the payload isn't base64.

    Example:
        >>> to_blob("data:text/plain;base64,aGk=")
        Blob(data=b'hi', type='text/plain')
    """
    if not data_url or not isinstance(data_url, str):
        raise FileEncodingError("Base64 string must not be empty", source=data_url)

    parts = data_url.split(",")
    if len(parts) < 2:
        raise FileEncodingError("Invalid base64 format", source=data_url)

    mime_match = _MIME_PATTERN.search(parts[0])
    if not mime_match:
        raise FileEncodingError("Cannot determine MIME type", source=data_url)

    try:
        data = base64.b64decode(parts[1])
    except (binascii.Error, ValueError) as exc:
        raise FileEncodingError("Invalid base64 payload", source=data_url) from exc

    return Blob(data=data, type=mime_match.group(1))


def to_file(data_url: Any, file_name: Any) -> NamedBlob:
    """
    Decode a data URL into a named in-memory file.

    Raises:
        FileEncodingError: If ``file_name`` is empty or the data URL is invalid.
    """
    if not file_name or not isinstance(file_name, str):
        raise FileEncodingError("File name must not be empty", source=file_name)

    blob = to_blob(data_url)
    return NamedBlob(data=blob.data, type=blob.type, name=file_name)
