"""
Module: config

Purpose:
    Configuration dataclasses and defaults for the utility modules.
    Provides immutable settings for tree construction and image
    compression, plus shared format constants.

Key Classes:
    - TreeConfig: Field names used by build_tree
    - CompressionConfig: Resize and quality settings for compress_img

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - data.tree_builder: Resolves id/parentId/children field names
    - data.grouping: GROUP_DATA_FIELD
    - files.images: CompressionConfig defaults
    - dates.formatting: DEFAULT_DATE_FORMAT
    - color.schemes: DEFAULT_GRADIENT_STEPS
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_DATE_FORMAT = "YYYY-MM-DD HH:mm:ss"
DEFAULT_GRADIENT_STEPS = 10
GROUP_DATA_FIELD = "allData"


@dataclass(frozen=True)
class TreeConfig:
    """
    Field names used when linking flat records into a tree.

    Attributes:
        id_field: Attribute holding a record's identifier (default "id")
        parent_id_field: Attribute holding the parent's identifier (default "parentId")
        children_field: Attribute children are attached under (default "children")
        in_place: Attach children onto the caller's records (default True).
            When False, shallow copies are linked instead.
    """
    id_field: str = "id"
    parent_id_field: str = "parentId"
    children_field: str = "children"
    in_place: bool = True

    @classmethod
    def resolve(
        cls,
        id_field: Optional[str] = None,
        parent_id_field: Optional[str] = None,
        children_field: Optional[str] = None,
        *,
        in_place: bool = True,
    ) -> TreeConfig:
        """
        Build a config, falling back to defaults for empty field names.

        Example:
            >>> TreeConfig.resolve("key", "", None).parent_id_field
            'parentId'
        """
        defaults = cls()
        return cls(
            id_field=id_field or defaults.id_field,
            parent_id_field=parent_id_field or defaults.parent_id_field,
            children_field=children_field or defaults.children_field,
            in_place=in_place,
        )


@dataclass(frozen=True)
class CompressionConfig:
    """
    Settings for JPEG re-encoding of base64 images.

    Attributes:
        max_width: Longest side allowed after scaling, in pixels (default 1000)
        small_image_mb: Payload size at or below which small_quality applies
        small_quality: Quality (0-1) for small payloads (default 0.9)
        large_quality: Quality (0-1) for larger payloads (default 0.8)
        output_format: Pillow format name for the output (default "JPEG")
        output_mime: MIME type written into the data URL
    """
    max_width: int = 1000
    small_image_mb: float = 1.0
    small_quality: float = 0.9
    large_quality: float = 0.8
    output_format: str = "JPEG"
    output_mime: str = "image/jpeg"

    def quality_for(self, size_mb: float) -> float:
        """Pick the default quality for a payload of ``size_mb`` megabytes."""
        if size_mb <= self.small_image_mb:
            return self.small_quality
        return self.large_quality
