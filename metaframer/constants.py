"""Shared spacing, sizing and typography constants for frame rendering."""

# Sentinel shown when an image lacks a metadata tag
NOT_AVAILABLE: str = "N/A"

# Layout spacing in pixels
LETTER_WIDTH: int = 10  # Fixed advance width used to estimate text width
BORDER: int = 10        # Gap between icons, labels and the strip edges
ICON_SIZE: int = 30     # Icons are drawn in a square of this size

# Strip height when none is given on the command line
DEFAULT_FRAME_HEIGHT: int = 40

# Typography and colors of the rendered strip
FONT_SIZE: float = 16
FONT_NAME: str = "Helvetica"
BACKGROUND_COLOR: str = "#ffffff"
FOREGROUND_COLOR: str = "#202020"

DEFAULT_TEMPLATE: str = "default"
DEFAULT_RESOLUTION: str = "1080p"
