"""Frame generation orchestrator: one metadata strip per input image."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, UnidentifiedImageError

from .constants import DEFAULT_FRAME_HEIGHT, DEFAULT_TEMPLATE
from .draw import build_drawing, render_frame
from .fonts import setup_label_font
from .framer import get_frame_data, get_frame_path
from .layout import DEFAULT_SPACING, LayoutSpacing
from .resolution import Resolution, get_frame_width
from .templates import TemplateError, get_template_set
from .text_values import read_exif_tags

logger = logging.getLogger(__name__)


class FrameError(Exception):
    """Raised when a frame can't be generated for an input file."""


@dataclass(frozen=True)
class FrameOptions:
    resolution: Resolution = Resolution.FULL_HD
    portrait: bool = False
    frame_height: int = DEFAULT_FRAME_HEIGHT
    inset: bool = False
    output_format: str = "svg"
    spacing: LayoutSpacing = DEFAULT_SPACING


def process_file(path: Path, options: FrameOptions, template_set, font_name: str) -> Path:
    """Generate the frame for one image and return the written path."""
    path = Path(path)
    _, display_height = options.resolution.oriented(options.portrait)
    if not 0 < options.frame_height < display_height:
        raise FrameError(
            f"strip height {options.frame_height} must be between 1 and "
            f"{display_height - 1} for a {options.resolution.value} display"
        )
    try:
        img = Image.open(path)
    except UnidentifiedImageError as exc:
        raise FrameError(f"file `{path}` is not a valid image") from exc
    except OSError as exc:
        raise FrameError(f"could not read file `{path}`") from exc

    with img:
        dimensions = img.size
        tags = read_exif_tags(img)

    excluded_height = 0 if options.inset else options.frame_height
    frame_width = get_frame_width(options.resolution, options.portrait, dimensions, excluded_height)
    logger.debug("%s: image %dx%d, frame width %d", path, dimensions[0], dimensions[1], frame_width)

    frame_data = get_frame_data((frame_width, options.frame_height), tags, options.spacing)
    drawing = build_drawing(frame_data, template_set, font_name, icon_size=options.spacing.icon_size)

    output_path = get_frame_path(path, options.output_format)
    try:
        render_frame(drawing, output_path, options.output_format)
    except OSError as exc:
        raise FrameError(f"could not write frame `{output_path}`") from exc
    return output_path


def main(
    paths: Iterable[Path],
    options: Optional[FrameOptions] = None,
    template_name: str = DEFAULT_TEMPLATE,
    font_path: Optional[str] = None,
) -> int:
    """Generate frames for every path, logging failures without stopping.

    Returns the number of files that failed.
    """
    if options is None:
        options = FrameOptions()
    paths = list(paths)
    logger.debug("Files: %s", [str(p) for p in paths])
    logger.debug("Resolution: %s", options.resolution.value)

    try:
        template_set = get_template_set(template_name)
    except TemplateError as exc:
        logger.error("%s", exc)
        return len(paths)
    font_name = setup_label_font(font_path)

    failures = 0
    for path in paths:
        try:
            output_path = process_file(path, options, template_set, font_name)
        except FrameError as exc:
            failures += 1
            if exc.__cause__ is not None:
                logger.error("%s: %s", exc, exc.__cause__)
            else:
                logger.error("%s", exc)
            continue
        logger.info("Wrote %s", output_path)

    if failures:
        logger.info("%d of %d files failed", failures, len(paths))
    return failures
