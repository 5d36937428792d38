"""
simscope entry point.

Usage:
    python -m simscope
    python -m simscope --entities 500 --steps 10000 --view all
    python -m simscope --loglevel DEBUG --hide-groups
"""

import argparse
import sys

from .logging import DEFAULT_LOG_FILE, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="simscope - live diagnostics overlay, running a demo simulation"
    )
    parser.add_argument(
        "--entities",
        type=int,
        default=100,
        help="Number of entities created at startup (default: 100)"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Total run length in steps; shown as progress (default: unbounded)"
    )
    parser.add_argument(
        "--tps",
        type=float,
        default=60.0,
        help="Simulation steps per second, 0 for as fast as possible (default: 60)"
    )
    parser.add_argument(
        "--sample-interval",
        type=float,
        default=None,
        help="Seconds between time series samples (default: from settings, else 1.0)"
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Samples kept per time series (default: from settings, else 300)"
    )
    parser.add_argument(
        "--hide-plots",
        action="store_true",
        help="Start with time series plots hidden"
    )
    parser.add_argument(
        "--hide-groups",
        action="store_true",
        help="Start with group bars hidden"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store the effective overlay settings as the new defaults"
    )
    parser.add_argument(
        "--view",
        choices=["monitor", "entity", "resources", "processes", "all"],
        default="monitor",
        help="Which overlay window(s) to open (default: monitor)"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=f"Set logging level (default: WARNING). DEBUG writes to {DEFAULT_LOG_FILE}"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )
    return parser


def main():
    """Main entry point for simscope."""
    args = build_parser().parse_args()

    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    from .core.settings import OverlayConfig, load_settings, save_settings
    config = OverlayConfig.from_settings(load_settings())
    if args.sample_interval is not None:
        config.sample_interval = args.sample_interval
    if args.capacity is not None:
        config.plot_capacity = args.capacity
    config.hide_plots = config.hide_plots or args.hide_plots
    config.hide_groups = config.hide_groups or args.hide_groups
    config.validate()
    if args.save_settings:
        save_settings(config.to_settings())

    # Import here to avoid slow startup for --help
    from .gui.app import run_app

    sys.exit(run_app(
        entities=args.entities,
        run_length=args.steps,
        tps=args.tps,
        view=args.view,
        config=config,
    ))


if __name__ == "__main__":
    main()
