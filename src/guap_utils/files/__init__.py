"""
Files Package

File name helpers, MIME lookup, base64 / data URL encoding and
JPEG compression.
"""

from .naming import format_size, gen_unique_name, get_ext, get_name, get_name_no_ext
from .mime import DEFAULT_MIME, MIME_TYPES, get_mime
from .encoding import (
    Blob,
    FileEncodingError,
    NamedBlob,
    calc_base64_size,
    to_base64,
    to_blob,
    to_file,
)
from .images import ImageCompressionError, compress_img, scaled_size

__all__ = [
    # naming
    "get_ext",
    "get_name_no_ext",
    "get_name",
    "format_size",
    "gen_unique_name",
    # mime
    "DEFAULT_MIME",
    "MIME_TYPES",
    "get_mime",
    # encoding
    "Blob",
    "NamedBlob",
    "FileEncodingError",
    "calc_base64_size",
    "to_base64",
    "to_blob",
    "to_file",
    # images
    "ImageCompressionError",
    "compress_img",
    "scaled_size",
]
