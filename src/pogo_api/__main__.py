"""CLI entry point for pogo-api.

Supports running via `python -m pogo_api`.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from pogo_api.config import ApiConfig
from pogo_api.generators.api_generator import ApiGenerator
from pogo_api.utils.core.logger import configure_logging_system


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pogo-api",
        description="Build the pokemon API from a game master export.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML configuration file (defaults to settings relative to the working directory)",
    )
    parser.add_argument("--game-master", type=Path, help="Override the game master file")
    parser.add_argument("--output-dir", type=Path, help="Override the output directory")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the game master if the file is missing",
    )
    parser.add_argument(
        "--force-download",
        action="store_true",
        help="Always download a fresh game master",
    )
    parser.add_argument(
        "--merge-orphan-variants",
        action="store_true",
        help="Fold variants by species regardless of record order instead of dropping early ones",
    )
    parser.add_argument("--log-level", help="Override the logging level")
    return parser


def load_config(args: argparse.Namespace) -> ApiConfig:
    """Build the configuration from the YAML file and command line overrides."""
    if args.config is not None:
        config = ApiConfig.from_yaml(args.config)
    else:
        config = ApiConfig(project_root=Path.cwd())

    if args.game_master is not None:
        config.game_master_file = str(args.game_master)
    if args.output_dir is not None:
        config.output_dir = str(args.output_dir)
    if args.merge_orphan_variants:
        config.merge_orphan_variants = True
    if args.log_level:
        config.logging_level = args.log_level.upper()
    return config


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, TypeError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging_system(config)

    generator = ApiGenerator(config, download=args.download, force_download=args.force_download)
    return 0 if generator.run() else 1


if __name__ == "__main__":
    sys.exit(main())
