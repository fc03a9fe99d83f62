"""Display strings for the camera metadata shown on a frame."""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from fractions import Fraction
from typing import Any, Dict, Mapping, Optional

from PIL import ExifTags, Image

from .constants import NOT_AVAILABLE


logger = logging.getLogger(__name__)


class FieldKey(Enum):
    """Attributes that can be placed on a frame.

    Values are the names of the matching ``ResolvedFields`` attributes.
    """

    CAMERA = "camera"
    APERTURE = "aperture"
    SHUTTER_SPEED = "shutter_speed"
    FOCAL_LENGTH = "focal_length"
    ISO = "iso"

    @property
    def display_name(self) -> str:
        """Name used to look up the icon template, e.g. ``ShutterSpeed``."""
        return "".join(part.capitalize() for part in self.value.split("_"))


@dataclass(frozen=True)
class ResolvedFields:
    camera: str = NOT_AVAILABLE
    aperture: str = NOT_AVAILABLE
    shutter_speed: str = NOT_AVAILABLE
    focal_length: str = NOT_AVAILABLE
    iso: str = NOT_AVAILABLE

    def get(self, key: FieldKey) -> str:
        return getattr(self, key.value)


# Every key must resolve to a field, so a key added without a field fails on import
_FIELD_NAMES = {f.name for f in fields(ResolvedFields)}
_MISSING = [key for key in FieldKey if key.value not in _FIELD_NAMES]
if _MISSING:
    raise TypeError(f"ResolvedFields has no field for {_MISSING}")


def read_exif_tags(img: Image.Image) -> Dict[int, Any]:
    """Return the primary IFD tags of an image merged with its Exif sub-IFD."""
    exif = img.getexif()
    tags: Dict[int, Any] = dict(exif.items())
    tags.update(exif.get_ifd(ExifTags.IFD.Exif))
    for tag, value in tags.items():
        logger.debug("%s %s", ExifTags.TAGS.get(tag, tag), value)
    return tags


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return str(value).strip().strip("\x00").strip().strip('"')


def _as_fraction(value: Any) -> Optional[Fraction]:
    """Convert EXIF rationals, (num, den) tuples or plain numbers to a Fraction."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)) and len(value) == 2:
        num, den = value
    elif hasattr(value, "numerator") and hasattr(value, "denominator"):
        num, den = value.numerator, value.denominator
    else:
        try:
            return Fraction(float(value)).limit_denominator(100000)
        except (TypeError, ValueError, OverflowError):
            return None
    try:
        if not den:
            return None
        return Fraction(num) / Fraction(den)
    except (TypeError, ValueError):
        return None


def _format_decimal(value: Fraction) -> str:
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


def get_camera(tags: Mapping[int, Any]) -> str:
    brand = _clean_text(tags.get(ExifTags.Base.Make))
    model = _clean_text(tags.get(ExifTags.Base.Model))
    if not brand or not model:
        return NOT_AVAILABLE
    return f"{brand} {model}"


def get_shutter_speed(tags: Mapping[int, Any]) -> str:
    exposure = _as_fraction(tags.get(ExifTags.Base.ExposureTime))
    if exposure is None or exposure <= 0:
        return NOT_AVAILABLE
    if exposure < 1:
        exposure = exposure.limit_denominator(100000)
        return f"{exposure.numerator}/{exposure.denominator} s"
    return f"{_format_decimal(exposure)} s"


def get_aperture(tags: Mapping[int, Any]) -> str:
    fnumber = _as_fraction(tags.get(ExifTags.Base.FNumber))
    if fnumber is None:
        return NOT_AVAILABLE
    return f"f/{_format_decimal(fnumber)}"


def get_focal_length(tags: Mapping[int, Any]) -> str:
    focal = _as_fraction(tags.get(ExifTags.Base.FocalLength))
    if focal is None:
        return NOT_AVAILABLE
    return f"{_format_decimal(focal)} mm"


def get_iso(tags: Mapping[int, Any]) -> str:
    iso = tags.get(ExifTags.Base.ISOSpeedRatings)
    if isinstance(iso, (list, tuple)):
        iso = iso[0] if iso else None
    if iso is None:
        return NOT_AVAILABLE
    return _clean_text(iso) or NOT_AVAILABLE


def resolve_fields(tags: Mapping[int, Any]) -> ResolvedFields:
    """Build display strings from EXIF tags keyed by numeric tag id.

    Missing or unreadable tags are shown as ``N/A``.
    """
    return ResolvedFields(
        camera=get_camera(tags),
        aperture=get_aperture(tags),
        shutter_speed=get_shutter_speed(tags),
        focal_length=get_focal_length(tags),
        iso=get_iso(tags),
    )
