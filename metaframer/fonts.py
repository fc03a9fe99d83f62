import logging
import os

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from .constants import FONT_NAME

logger = logging.getLogger(__name__)


def _register_ttf_font(family_name, font_path):
    """Register a TTF font with ReportLab under family_name. Returns the registered name."""
    if family_name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(family_name, font_path))
    return family_name


def setup_label_font(font_path=None):
    """Best-effort registration of the font used for labels.

    Returns the font name to draw labels with. If no path is given or the file
    can't be loaded as a TrueType font, keep the built-in Helvetica.
    """
    if not font_path:
        return FONT_NAME
    if not os.path.isfile(font_path):
        logger.warning("Font file %s not found, using %s", font_path, FONT_NAME)
        return FONT_NAME
    family = os.path.splitext(os.path.basename(font_path))[0]
    try:
        name = _register_ttf_font(family, font_path)
    except TTFError as exc:
        logger.warning("Could not load font %s (%s), using %s", font_path, exc, FONT_NAME)
        return FONT_NAME
    logger.debug("Registered label font %s from %s", name, font_path)
    return name
