"""Target display resolutions and the frame width derived from them."""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Resolution(Enum):
    """Resolution presets, valued by their command line name."""

    HD = "720p"
    FULL_HD = "1080p"
    QUAD_HD = "2k"
    UHD = "UHD"
    FOUR_K = "4k"
    EIGHT_K = "8k"

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Landscape (width, height) of the preset in pixels."""
        return _DIMENSIONS[self]

    def oriented(self, is_portrait: bool) -> Tuple[int, int]:
        """(width, height) of the display, rotated when portrait."""
        width, height = self.dimensions
        return (height, width) if is_portrait else (width, height)

    @property
    def help(self) -> str:
        width, height = self.dimensions
        return f"{_LABELS[self]} resolution {width}x{height}"


_DIMENSIONS = {
    Resolution.HD: (1280, 720),
    Resolution.FULL_HD: (1920, 1080),
    Resolution.QUAD_HD: (2560, 1440),
    Resolution.UHD: (3840, 2160),
    Resolution.FOUR_K: (4096, 2160),
    Resolution.EIGHT_K: (7680, 4320),
}

_LABELS = {
    Resolution.HD: "HD",
    Resolution.FULL_HD: "Full HD",
    Resolution.QUAD_HD: "Quad HD",
    Resolution.UHD: "Ultra HD",
    Resolution.FOUR_K: "4k",
    Resolution.EIGHT_K: "8k",
}


def get_frame_width(
    resolution: Resolution,
    is_portrait: bool,
    image_size: Tuple[int, int],
    excluded_height: int,
) -> int:
    """Width of the frame for an image shown at the given resolution.

    Args:
        resolution: Target display preset
        is_portrait: Rotate the preset to portrait orientation
        image_size: (width, height) of the source image
        excluded_height: Height reserved for the strip below the image, 0 when inset
    Returns:
        The target width when the image is wider than the target, otherwise the
        width of the image once scaled to the available height.
    """
    o_width, o_height = image_size
    frame_width, frame_height = resolution.oriented(is_portrait)
    frame_height -= excluded_height
    if frame_height <= 0:
        raise ValueError(
            f"strip height {excluded_height} leaves no room on a {resolution.value} display"
        )

    # Aspect ratios are truncated to whole numbers before comparing
    if o_width // o_height > frame_width // frame_height:
        return frame_width

    scale = frame_height / o_height
    return int(scale * o_width)
