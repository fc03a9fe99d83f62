import argparse
import logging
import sys
from pathlib import Path

from metaframer.constants import DEFAULT_FRAME_HEIGHT, DEFAULT_RESOLUTION, DEFAULT_TEMPLATE
from metaframer.draw import OUTPUT_FORMATS
from metaframer.generator import FrameOptions, main
from metaframer.resolution import Resolution


VERBOSITY_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of pixels, got {value}")
    return number


def parse_args(argv=None):
    resolution_help = ", ".join(f"{r.value} ({r.help})" for r in Resolution)
    parser = argparse.ArgumentParser(description="Generate a camera metadata strip for each image")
    parser.add_argument("paths", nargs="*", type=Path, help="Images to generate frames for")
    parser.add_argument("-r", "--resolution", choices=[r.value for r in Resolution], default=DEFAULT_RESOLUTION, help=f"Resolution to which the frame should be adjusted, the frame width is calculated according to this value. One of: {resolution_help}")
    parser.add_argument("-p", "--portrait", action="store_true", help="Use the resolution in portrait orientation")
    parser.add_argument("--height", dest="frame_height", type=positive_int, default=DEFAULT_FRAME_HEIGHT, help="Height of the generated strip in pixels")
    parser.add_argument("-i", "--inset", action="store_true", help="Strip is laid over the image, so its height is not taken from the image area")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Name of the icon template set")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default="svg", help="Output document format")
    parser.add_argument("--font", help="Path to a TrueType font used for the labels", required=False)
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More output, repeat for debug messages")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Less output, repeat to silence errors")
    return parser.parse_args(argv)


def log_level(verbose, quiet):
    index = VERBOSITY_LEVELS.index(logging.WARNING) + verbose - quiet
    return VERBOSITY_LEVELS[max(0, min(index, len(VERBOSITY_LEVELS) - 1))]


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=log_level(args.verbose, args.quiet), format="%(message)s")
    options = FrameOptions(
        resolution=Resolution(args.resolution),
        portrait=args.portrait,
        frame_height=args.frame_height,
        inset=args.inset,
        output_format=args.output_format,
    )
    # Failing files are reported in the log, the run itself succeeds
    main(args.paths, options, template_name=args.template, font_path=args.font)
    return 0


if __name__ == "__main__":
    sys.exit(run())
