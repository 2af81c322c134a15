"""Command-line interface for delivery analysis."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from capture.keypoint_io import load_keypoint_session, save_delivery_result
from capture.simulated import SimConfig, SimulatedExtractor
from configs.settings import AppConfig, default_config, load_config
from contracts import DeliveryResult
from delivery.segmenter import segment
from delivery.timeline import phase_spans
from exceptions import ConfigError, SeamTrackerError
from log_config.logger import configure_logging, get_logger
from metrics.report import summary_lines

from analysis.pipeline import analyze_clip

logger = get_logger(__name__)


def _load_config(args) -> AppConfig:
    if args.config:
        return load_config(Path(args.config))
    return default_config()


def _print_result(result: DeliveryResult, show_phases: bool) -> None:
    for line in summary_lines(result):
        print(line)
    if show_phases:
        print("\n  Phases:")
        for phase, first, last in phase_spans(result):
            print(f"    {phase.value:<15} frames {first + 1}-{last + 1}")


def analyze_command(args) -> int:
    """Handle analyze command.

    Args:
        args: Parsed command-line arguments
    """
    try:
        config = _load_config(args)
        samples = load_keypoint_session(args.session)
    except SeamTrackerError as e:
        logger.error(f"Cannot analyze {args.session}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = segment(samples, config)
    _print_result(result, args.phases)

    if args.output:
        path = save_delivery_result(result, args.output)
        print(f"\n  JSON result: {path}")
    return 0


def simulate_command(args) -> int:
    """Handle simulate command: analyze a synthetic delivery."""
    try:
        config = _load_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sim = SimConfig(duration_s=args.duration, seed=args.seed)
    result = analyze_clip(
        SimulatedExtractor(sim),
        lambda t: t,
        sim.duration_s,
        sim.width,
        sim.height,
        config,
    )
    _print_result(result, args.phases)

    if args.output:
        path = save_delivery_result(result, args.output)
        print(f"\n  JSON result: {path}")
    return 0


def validate_config_command(args) -> int:
    """Handle validate-config command."""
    try:
        load_config(Path(args.config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        for message in getattr(e, "validation_errors", []):
            print(f"  - {message}", file=sys.stderr)
        return 1
    print(f"Configuration OK: {args.config}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seamtracker",
        description="SeamTracker bowling delivery analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a keypoint session exported by the pose extractor
  seamtracker analyze recordings/delivery_001.json

  # Save the full result and show phase spans
  seamtracker analyze recordings/delivery_001.json --output out/delivery_001.json --phases

  # Analyze a synthetic delivery
  seamtracker simulate --duration 1.5

  # Check a configuration file
  seamtracker validate-config configs/default.yaml
        """,
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-dir',
        help='Directory for rotating log files (default: no file logging)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    analyze_parser = subparsers.add_parser(
        'analyze',
        help='Analyze a keypoint session file'
    )
    analyze_parser.add_argument(
        'session',
        help='Path to keypoint session JSON'
    )
    analyze_parser.add_argument(
        '--config',
        help='Path to YAML configuration (default: built-in constants)'
    )
    analyze_parser.add_argument(
        '--output',
        help='Write the delivery result JSON to this path'
    )
    analyze_parser.add_argument(
        '--phases',
        action='store_true',
        help='Print phase spans'
    )

    simulate_parser = subparsers.add_parser(
        'simulate',
        help='Analyze a synthetic delivery'
    )
    simulate_parser.add_argument(
        '--duration',
        type=float,
        default=1.5,
        help='Synthetic clip duration in seconds (default: 1.5)'
    )
    simulate_parser.add_argument(
        '--seed',
        type=int,
        default=7,
        help='Noise seed (default: 7)'
    )
    simulate_parser.add_argument(
        '--config',
        help='Path to YAML configuration (default: built-in constants)'
    )
    simulate_parser.add_argument(
        '--output',
        help='Write the delivery result JSON to this path'
    )
    simulate_parser.add_argument(
        '--phases',
        action='store_true',
        help='Print phase spans'
    )

    validate_parser = subparsers.add_parser(
        'validate-config',
        help='Validate a YAML configuration file'
    )
    validate_parser.add_argument(
        'config',
        help='Path to YAML configuration'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING", args.log_dir)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command handler
    if args.command == 'analyze':
        return analyze_command(args)
    elif args.command == 'simulate':
        return simulate_command(args)
    elif args.command == 'validate-config':
        return validate_config_command(args)

    return 0


if __name__ == '__main__':
    sys.exit(main())
