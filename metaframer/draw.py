"""Drawing helpers turning frame data into a reportlab drawing and writing it out."""
from reportlab.graphics import renderPDF, renderSVG
from reportlab.graphics.shapes import Drawing, Rect, String
from reportlab.lib import colors

from .constants import BACKGROUND_COLOR, FONT_NAME, FONT_SIZE, FOREGROUND_COLOR, ICON_SIZE
from .templates import build_icon

OUTPUT_FORMATS = ("svg", "pdf")


def build_drawing(frame_data, template_set, font_name=FONT_NAME, icon_size=ICON_SIZE, font_size=FONT_SIZE):
    """Build a drawing the size of the strip with one icon and label per positioned item.

    Icons and labels are centered vertically. Items placed outside the strip are
    drawn anyway and clipped by the viewer.
    """
    width, height = frame_data.width, frame_data.height
    foreground = colors.HexColor(FOREGROUND_COLOR)

    d = Drawing(width, height)
    d.add(Rect(0, 0, width, height, fillColor=colors.HexColor(BACKGROUND_COLOR), strokeColor=None))

    icon_y = (height - icon_size) / 2
    # Baseline such that cap height is centered
    text_y = (height - font_size * 0.7) / 2
    for item in frame_data.items:
        builder = template_set[item.field_key]
        d.add(build_icon(builder, item.icon_position, icon_y, icon_size, foreground))
        d.add(String(item.text_position, text_y, item.text, fontName=font_name,
                     fontSize=font_size, fillColor=foreground))
    return d


def render_frame(drawing, output_path, fmt="svg"):
    """Write the drawing to output_path as SVG or PDF."""
    if fmt == "svg":
        renderSVG.drawToFile(drawing, str(output_path))
    elif fmt == "pdf":
        renderPDF.drawToFile(drawing, str(output_path))
    else:
        raise ValueError(f"Unsupported output format {fmt!r}, expected one of {OUTPUT_FORMATS}")
