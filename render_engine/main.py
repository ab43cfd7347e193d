#!/usr/bin/env python3
"""
Render Engine - Main Entry Point

Renders an HTML file with an optional stylesheet to a PNG image.
"""

import argparse
import sys
from typing import List, Optional

from render_engine import __version__
from render_engine.core import RenderEngine
from render_engine.errors import RenderError
from render_engine.layout import format_layout_tree
from render_engine.parser.html_parser import SUPPORTED_PARSERS
from render_engine.rendering import format_display_list
from render_engine.utils.config import Config
from render_engine.utils.logging import default_log_file, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render Engine - render HTML and CSS to a PNG image")

    parser.add_argument("html", help="HTML file to render")
    parser.add_argument("css", nargs="?", help="CSS file to apply", default=None)
    parser.add_argument("-o", "--output", help="Output PNG path (default from config)")
    parser.add_argument("--width", type=int, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, help="Viewport height in pixels")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--html-parser", choices=SUPPORTED_PARSERS, help="HTML tree builder to use")
    parser.add_argument("--dump-layout", action="store_true", help="Print the laid-out box tree")
    parser.add_argument("--dump-display-list", action="store_true", help="Print the display list")
    parser.add_argument("--log-file", nargs="?", const=default_log_file(),
                        help="Also log to a file (default location if no path is given)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Render Engine {__version__}")

    return parser.parse_args(argv)


def _read(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_args(argv)

    config = Config(args.config)
    if args.html_parser:
        config.set('parser.html', args.html_parser)

    logger = setup_logging(
        console_level="DEBUG" if args.debug else config.get('logging.console_level', "INFO"),
        log_file=args.log_file or config.get('logging.log_file'),
        file_level=config.get('logging.file_level', "DEBUG"),
    )

    try:
        html_content = _read(args.html)
        css_content = _read(args.css) if args.css else ""

        engine = RenderEngine(config, viewport_width=args.width, viewport_height=args.height)
        result = engine.render(html_content, css_content)
        logger.debug(f"Stage timings: {engine.timer.summary()}")

        if args.dump_layout:
            print(format_layout_tree(result.layout_root))
        if args.dump_display_list:
            print(format_display_list(result.display_list))

        output_path = args.output or config.get('output.path', 'output.png')
        result.canvas.to_image().save(output_path, format='PNG')
        logger.info(f"Saved {engine.viewport_width}x{engine.viewport_height} image to {output_path}")

    except RenderError as e:
        logger.error(f"Rendering failed: {e}", exc_info=args.debug)
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
