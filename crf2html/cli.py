"""
Command Line Interface for building texture galleries.
"""

import argparse
import logging
from typing import List, Optional

from .builder import GalleryBuilder
from .errors import Crf2HtmlError, InvalidConfiguration
from .progress import GalleryProgress
from .settings import ProgramSettings, parse_color


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('crf2html')


def positive_int(value: str) -> int:
    """argparse type for a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r} (expected a positive integer)")
    if number < 1:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r} (must be at least 1)")
    return number


def quality(value: str) -> int:
    """argparse type for a JPEG quality between 1 and 100."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid quality: {value!r}")
    if not 1 <= number <= 100:
        raise argparse.ArgumentTypeError(f"invalid quality: {value!r} (must be 1-100)")
    return number


def color(value: str):
    """argparse type for an '#rrggbb' colour."""
    try:
        return parse_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def get_settings(args: argparse.Namespace) -> ProgramSettings:
    """Get settings from environment and CLI overrides."""
    settings = ProgramSettings.from_env(args.source, args.output)
    return settings.with_overrides(
        title=args.title,
        thumbnail_size=args.size,
        background_color=args.background,
        jpeg_quality=args.quality,
        skip_errors=args.skip_errors or None,
    )


def cmd_build(args: argparse.Namespace) -> int:
    """Build the gallery page."""
    logger = setup_logging(args.verbose)

    settings = get_settings(args)
    errors = settings.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    logger.info(f"Source: {settings.source_path}")
    logger.info(f"Output: {settings.output_path}")
    logger.info(f"Title: {settings.title}")
    logger.info(f"Thumbnail size: {settings.thumbnail_size}px")

    if settings.skip_errors:
        logger.info("Skip-errors mode: undecodable textures will be left out")

    try:
        builder = GalleryBuilder(settings, logger=logger)

        progress = None
        if not args.quiet:
            progress = GalleryProgress(
                show_files=args.show_files,
                logger=logger
            )

        stats = builder.build(progress)

        if not args.quiet:
            print()
            print(f"Textures: {stats.processed}")
            print(f"Families: {stats.families}")
            print(f"Skipped: {stats.skipped}")
            print(f"Errors: {stats.errors}")
            print(f"Page size: {stats.bytes_written:,} bytes")
            print(f"Time: {stats.elapsed_seconds:.1f}s")

        return 0

    except InvalidConfiguration as e:
        for error in e.errors:
            logger.error(error)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Crf2HtmlError as e:
        logger.error(f"Build failed: {e}")
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='crf2html',
        description='Build a single-page HTML gallery from a texture directory or CRF/ZIP archive',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  crf2html ./fam.crf ./textures.html
  crf2html ./textures/ ./textures.html --title "My Textures" --size 256

Environment:
  CRF2HTML_TITLE and CRF2HTML_SIZE set defaults for --title and --size.
"""
    )

    parser.add_argument('source', help='Texture directory or CRF/ZIP archive')
    parser.add_argument('output', help='HTML file to write')
    parser.add_argument('-t', '--title', help='Page title (default: Textures)')
    parser.add_argument('-s', '--size', type=positive_int, metavar='PX',
                        help='Thumbnail size in pixels (default: 128)')
    parser.add_argument('--background', type=color, metavar='#RRGGBB',
                        help='Background behind transparent textures (default: #ffffff)')
    parser.add_argument('--quality', type=quality,
                        help='JPEG quality of embedded thumbnails (default: 100)')
    parser.add_argument('--skip-errors', action='store_true',
                        help='Leave out textures that fail to decode instead of aborting')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    parser.add_argument('--show-files', action='store_true',
                        help='Print each file as processed with result')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return cmd_build(parsed_args)
