#!/usr/bin/env python3
"""
Log Pattern Viewer - A terminal user interface for browsing log pattern reports
"""
import argparse
import curses
import logging
from pathlib import Path

from patview.input_controller import CursesInputController
from patview.models.pattern import Pattern
from patview.models.report import ReportError
from patview.output_controller import CursesOutputController
from patview.report_source import DEFAULT_REGION, create_report_source, load_report
from patview.views.app import App

LOG_FILE = Path(__file__).parent / "patview.log"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s[%(process)d]: %(levelname)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
    handlers=[
        logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8"),
    ],
)

logger = logging.getLogger(__name__)


def _init_app(stdscr: curses.window, patterns: list[Pattern], source_name: str) -> None:
    logger.info("Starting viewer")
    viewer = App(
        CursesOutputController(stdscr),
        CursesInputController(stdscr),
        patterns,
        source_name,
    )
    try:
        viewer.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt")
    except BaseException as e:
        logger.exception("An error occurred")
        raise e
    finally:
        logger.info("Exiting viewer")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        description="Log Pattern Viewer - Browse aggregated log pattern reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:
      %(prog)s --from-local report.json
      %(prog)s --namespace prod --name billing -y 2022 -m 3
      %(prog)s --namespace prod --name billing -y 2022 -m 3 -p ops

    Navigation:
      ↑/↓ or k/j    - Move up/down (scroll in the detail view)
      ←/→ or h/l    - Switch view
      d or Enter    - Show the selected sample
      p             - Show the samples of the selected pattern
      q or Esc      - Quit
    """,
    )

    parser.add_argument("-f", "--from-local", help="Local log pattern report file")
    parser.add_argument("--namespace", help="Namespace of the app")
    parser.add_argument("--name", help="Name of the app")
    parser.add_argument("-y", "--year", type=int, help="Year of the report")
    parser.add_argument("-m", "--month", type=int, help="Month of the report")
    parser.add_argument("-p", "--profile", help="AWS profile name")
    parser.add_argument(
        "--region",
        default=DEFAULT_REGION,
        help=f"AWS region name (default: {DEFAULT_REGION})",
    )
    return parser


def main() -> None:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args()

    if args.month is not None and not 1 <= args.month <= 12:
        parser.error(f"Invalid month {args.month}")

    try:
        source = create_report_source(args)
        patterns = load_report(source)
    except ReportError as e:
        logger.error("Cannot load report: %s", e)
        parser.error(str(e))

    curses.wrapper(_init_app, patterns, source.get_name())


if __name__ == "__main__":
    main()
