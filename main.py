# main.py
import os
import sys
import logging
import argparse

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))


def setup_initial_logging(level=logging.INFO):
    """Sets up a basic logger before the Kivy app takes over."""
    handlers = [logging.StreamHandler()]
    if "ANDROID_ARGUMENT" in os.environ:
        try:
            handlers.append(logging.FileHandler("/sdcard/responsive_metrics_log.txt"))
        except OSError as e:
            print(f"Could not create file handler for logging: {e}")

    logging.basicConfig(
        level=level,
        format='RESPONSIVE %(asctime)s - %(levelname)s - %(name)s - %(message)s',
        handlers=handlers
    )
    logging.info("Launcher: Initializing...")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the responsive metrics for a viewport, or open the live preview."
    )
    parser.add_argument("--width", type=float, help="Viewport width in dp")
    parser.add_argument("--height", type=float, help="Viewport height in dp")
    parser.add_argument("--density", type=float, default=1.0, help="Device pixel ratio (default: 1.0)")
    parser.add_argument("--buttons", type=int, default=2, help="Dialog button count for the report")
    parser.add_argument("--tables", help="Path to a responsive tables override JSON file")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def print_report(args) -> int:
    from responsive_metrics import ResponsiveSystem, ViewportMetrics, ResponsiveError
    from responsive_metrics.engine import format_report
    from responsive_metrics.resource_manager import load_tables

    try:
        system = ResponsiveSystem(load_tables(args.tables))
        metrics = ViewportMetrics(width=args.width, height=args.height, pixel_density=args.density)
        print(format_report(system.describe(metrics, button_count=args.buttons)))
    except (ResponsiveError, FileNotFoundError) as e:
        logging.error(f"Launcher: {e}")
        return 2
    return 0


def main(argv=None):
    """The main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_initial_logging(logging.DEBUG if args.verbose else logging.INFO)

    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")
    if args.width is not None:
        return print_report(args)

    try:
        from responsive_metrics.main import ResponsiveMetricsPreviewApp

        logging.info("Launcher: Starting the ResponsiveMetricsPreviewApp.")
        ResponsiveMetricsPreviewApp(tables_path=args.tables).run()
    except ImportError:
        logging.critical("FATAL LAUNCH ERROR: Could not import the preview app. Is Kivy installed?", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
