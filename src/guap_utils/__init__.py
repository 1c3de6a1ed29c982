"""Top-level package for guap-utils.

Provides subpackages:
- guap_utils.data – tree building and grouping of flat records
- guap_utils.color – hex/RGB/HSL conversion and palettes
- guap_utils.dates – date formatting, parsing and arithmetic
- guap_utils.files – file names, MIME types, data URLs, image compression
- guap_utils.validation – input format checks
"""

from __future__ import annotations


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text(encoding="utf-8").splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("guap-utils")
    except PackageNotFoundError:
        return "0.0.0"


from . import color, data, dates, files, validation  # noqa: E402
from .data import build_tree, group_by, handle_tree  # noqa: E402

__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "color",
    "data",
    "dates",
    "files",
    "validation",
    "build_tree",
    "handle_tree",
    "group_by",
]
