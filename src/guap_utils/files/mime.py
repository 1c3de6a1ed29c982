"""
Module: files.mime

Purpose:
    Extension to MIME type lookup for common web file types.
"""

from __future__ import annotations

from typing import Any

from .naming import get_ext

DEFAULT_MIME = "application/octet-stream"

MIME_TYPES = {
    # images
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "ico": "image/x-icon",
    # video
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "wmv": "video/x-ms-wmv",
    "flv": "video/x-flv",
    "webm": "video/webm",
    "mkv": "video/x-matroska",
    # audio
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "flac": "audio/flac",
    "aac": "audio/aac",
    "ogg": "audio/ogg",
    "m4a": "audio/mp4",
    # documents
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "txt": "text/plain",
    "rtf": "application/rtf",
    # other
    "json": "application/json",
    "xml": "application/xml",
    "html": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "zip": "application/zip",
    "rar": "application/x-rar-compressed",
}


def get_mime(filename: Any) -> str:
    """
    MIME type for a file name, by extension.

    Example:
        >>> get_mime("clip.MP4")
        'video/mp4'
        >>> get_mime("data.bin")
        'application/octet-stream'
    """
    return MIME_TYPES.get(get_ext(filename), DEFAULT_MIME)
