"""Icon templates drawn next to each label, built from reportlab shapes.

Icons are designed on a 30x30 grid with the origin in the lower-left corner
and scaled to the requested icon size.
"""
from __future__ import annotations

from typing import Callable, Dict

from reportlab.graphics.shapes import Circle, Group, Line, PolyLine, Rect, String
from reportlab.lib import colors

from .text_values import FieldKey

GRID = 30.0

IconBuilder = Callable[[colors.Color], Group]


class TemplateError(Exception):
    """Raised when a template set is unknown or lacks an icon."""


def camera_icon(color: colors.Color) -> Group:
    g = Group()
    g.add(Rect(2, 5, 26, 17, rx=3, ry=3, fillColor=None, strokeColor=color, strokeWidth=2))
    g.add(Rect(9, 22, 12, 4, fillColor=color, strokeColor=None))
    g.add(Circle(15, 13.5, 5.5, fillColor=None, strokeColor=color, strokeWidth=2))
    g.add(Circle(24, 18.5, 1.2, fillColor=color, strokeColor=None))
    return g


def aperture_icon(color: colors.Color) -> Group:
    g = Group()
    g.add(Circle(15, 15, 12, fillColor=None, strokeColor=color, strokeWidth=2))
    # Six blades meeting around a hexagonal opening
    blades = [(15, 27, 19, 11), (25.4, 21, 11, 13), (25.4, 9, 15, 19),
              (15, 3, 11, 19), (4.6, 9, 19, 17), (4.6, 21, 19, 11)]
    for x1, y1, x2, y2 in blades:
        g.add(Line(x1, y1, x2, y2, strokeColor=color, strokeWidth=1.5))
    return g


def shutter_speed_icon(color: colors.Color) -> Group:
    g = Group()
    g.add(Circle(15, 13, 11, fillColor=None, strokeColor=color, strokeWidth=2))
    g.add(Rect(12, 25, 6, 3, fillColor=color, strokeColor=None))
    g.add(PolyLine([15, 20, 15, 13, 20, 10], strokeColor=color, strokeWidth=2))
    return g


def focal_length_icon(color: colors.Color) -> Group:
    g = Group()
    # Converging rays through a lens
    g.add(Line(3, 24, 27, 15, strokeColor=color, strokeWidth=1.5))
    g.add(Line(3, 6, 27, 15, strokeColor=color, strokeWidth=1.5))
    g.add(PolyLine([13, 26, 11, 15, 13, 4], strokeColor=color, strokeWidth=2))
    g.add(PolyLine([13, 26, 15, 15, 13, 4], strokeColor=color, strokeWidth=2))
    return g


def iso_icon(color: colors.Color) -> Group:
    g = Group()
    g.add(Rect(1, 6, 28, 18, rx=2, ry=2, fillColor=None, strokeColor=color, strokeWidth=2))
    g.add(String(15, 11, "ISO", fontName="Helvetica-Bold", fontSize=10,
                 fillColor=color, textAnchor="middle"))
    return g


TEMPLATE_SETS: Dict[str, Dict[FieldKey, IconBuilder]] = {
    "default": {
        FieldKey.CAMERA: camera_icon,
        FieldKey.APERTURE: aperture_icon,
        FieldKey.SHUTTER_SPEED: shutter_speed_icon,
        FieldKey.FOCAL_LENGTH: focal_length_icon,
        FieldKey.ISO: iso_icon,
    },
}


def get_template_set(name: str) -> Dict[FieldKey, IconBuilder]:
    """Return the icon builders of a template set, checking every field has one."""
    try:
        template_set = TEMPLATE_SETS[name]
    except KeyError:
        raise TemplateError(
            f"unknown template `{name}`, available: {', '.join(sorted(TEMPLATE_SETS))}"
        ) from None
    missing = [key.display_name for key in FieldKey if key not in template_set]
    if missing:
        raise TemplateError(f"template `{name}` has no icon for {', '.join(missing)}")
    return template_set


def build_icon(builder: IconBuilder, x: float, y: float, size: float, color: colors.Color) -> Group:
    """Draw an icon with its lower-left corner at (x, y), ``size`` pixels square."""
    icon = builder(color)
    icon.translate(x, y)
    icon.scale(size / GRID, size / GRID)
    return icon
