"""Frame data for one image: strip size and positioned metadata labels."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Tuple

from .layout import DEFAULT_SPACING, LayoutSpacing, PositionedItem, compute_layout
from .text_values import FieldKey, resolve_fields

LEFT_DISPLAY_ORDER = (FieldKey.CAMERA,)
RIGHT_DISPLAY_ORDER = (
    FieldKey.APERTURE,
    FieldKey.SHUTTER_SPEED,
    FieldKey.FOCAL_LENGTH,
    FieldKey.ISO,
)


@dataclass
class FrameData:
    width: int
    height: int
    items: List[PositionedItem] = field(default_factory=list)


def get_frame_data(
    size: Tuple[int, int],
    tags: Mapping[int, Any],
    spacing: LayoutSpacing = DEFAULT_SPACING,
) -> FrameData:
    """Resolve the metadata of an image and lay it out on a strip of the given size."""
    width, height = size
    resolved = resolve_fields(tags)
    items = compute_layout(resolved, width, LEFT_DISPLAY_ORDER, RIGHT_DISPLAY_ORDER, spacing)
    return FrameData(width=width, height=height, items=items)


def get_frame_path(path: Path, extension: str = "svg") -> Path:
    """Output path next to the image, e.g. ``photo.jpg`` -> ``photo_frame.svg``."""
    path = Path(path)
    return path.with_name(f"{path.stem}_frame.{extension}")
