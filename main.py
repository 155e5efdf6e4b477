import argparse
import logging
import os
import sys

from jpegresize.core.batch import BatchDriver
from jpegresize.core.errors import ConfigError, ResizeBatchError
from jpegresize.core.export import MAX_QUALITY, MIN_QUALITY, ExportConfig
from jpegresize.utils.config import DEFAULT_CONFIG_FILE, Config
from jpegresize.utils.logging import setup_logging

logger = logging.getLogger(__name__)

ATTENTION = "ATTENTION: "


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpegresize",
        description="Resize a directory of JPEG images for viewing and the web",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  %(prog)s                                  # defaults for everything
  %(prog)s -w 1920 -c 70 -q 8 -o "web"      # 8 concurrent resizes, quality 70
  %(prog)s -i originals -o resized --no-progress
        '''.strip()
    )
    parser.add_argument("-w", "--width", type=int, default=config.out_width,
                        help="resized image max width (default: %(default)s)")
    parser.add_argument("--height", type=int, default=config.out_height,
                        help="resized image max height (default: %(default)s)")
    parser.add_argument("-c", "--quality", type=int, default=config.quality,
                        help="jpeg compression rate, 10-100 (default: %(default)s)")
    parser.add_argument("-q", "--quota", type=int,
                        default=config.quota if config.quota is not None else (os.cpu_count() or 1),
                        help="number of concurrent resizing routines (default: %(default)s)")
    parser.add_argument("-i", "--input", default=config.input_dir,
                        help="input directory of original images (default: %(default)s)")
    parser.add_argument("-o", "--output", default=config.output_dir,
                        help="output directory for resized images (default: %(default)s)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="YAML config file (default: %(default)s)")
    parser.add_argument("--log-level", default=config.log_level.upper(),
                        help="logging level (default: %(default)s)")
    parser.add_argument("--no-progress", action="store_true",
                        help="hide the progress bar and per-file lines")
    return parser


def _config_path(argv) -> str:
    # --config must be known before the parser is built, since it feeds the defaults
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=DEFAULT_CONFIG_FILE)
    known, _ = pre.parse_known_args(argv)
    return known.config


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        config = Config.load(_config_path(argv))
    except (ConfigError, OSError) as e:
        print(f"{ATTENTION}{e}")
        return 1

    parser = build_parser(config)
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, config.log_dir)
    except (ValueError, OSError) as e:
        print(f"{ATTENTION}{e}")
        return 1

    if not argv:
        print(ATTENTION + "No Flags. We use defaults.")

    print(f"resized image max width: {args.width}, resized image max height: {args.height}")
    print(f"input directory of original images: {args.input}")
    print(f"output directory for resized images: {args.output}")
    print(f"jpeg compression rate: {args.quality}%\n")

    if not MIN_QUALITY <= args.quality <= MAX_QUALITY:
        print(ATTENTION + f"Compress rate must be in the range of {MIN_QUALITY} to {MAX_QUALITY}")
        parser.print_usage()
        return 1
    if args.quota < 1:
        print(ATTENTION + "Quota limit must be not zero.")
        parser.print_usage()
        return 1

    try:
        export = ExportConfig.create(
            max_width=args.width,
            max_height=args.height,
            quality=args.quality,
        )
        driver = BatchDriver(
            export=export,
            quota=args.quota,
            show_progress=not args.no_progress,
        )
        report = driver.run(args.input, args.output)
    except ResizeBatchError as e:
        print(f"{ATTENTION}{e}")
        return 1
    except KeyboardInterrupt:
        print("\n👋 Interrupted. Files already written stay in place.")
        return 130
    except Exception as e:
        logger.exception("Unexpected failure")
        print(f"{ATTENTION}Unexpected error: {e}")
        return 1

    print("\n" + report.summary_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
