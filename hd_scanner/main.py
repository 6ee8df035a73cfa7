import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .core import HDScannerApp, resolve_search_root
from .exceptions import StartupError, WalkError


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Console logging, plus an optional log file outside the scanned tree."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )

    # Silence chatty libraries
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="HD asset scanner: report which videos and images are 1920x1080 (60/59.94 fps)")

    p.add_argument("--search", type=str, default=None, help="Absolute path to search assets (prompted for if omitted)")
    p.add_argument("--workers", type=int, default=config.DEFAULT_MAX_WORKERS, help="Number of parallel probe workers")
    p.add_argument("--timeout", type=float, default=config.PROBE_TIMEOUT_SEC, help="Seconds allowed per mediainfo call")
    p.add_argument("--mediainfo", type=str, default=config.MEDIAINFO_BIN, help="mediainfo executable name or path")
    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    p.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    p.add_argument("--log-file", type=Path, default=None, help="Also write log lines to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def prompt_for_directory() -> str:
    try:
        return input("Directory to scan for assets: ")
    except EOFError:
        return ""


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    logging.info("STARTING...")

    try:
        app = HDScannerApp(
            mediainfo_bin=args.mediainfo,
            probe_timeout=args.timeout,
            max_workers=args.workers,
            show_progress=not args.no_progress,
        )
        search_root = resolve_search_root(args.search if args.search else prompt_for_directory())
        app.run(search_root)
    except StartupError as e:
        logging.critical(str(e))
        sys.exit(1)
    except WalkError as e:
        logging.critical(f"Failed on walk: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Scan cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during scan.")
        sys.exit(1)

    if args.pause:
        logging.info("Press enter to continue")
        sys.stdin.readline()


if __name__ == "__main__":
    main()
