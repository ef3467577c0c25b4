"""Command-line entry point.

Usage::

    svcscaffold create --name my-service
    svcscaffold create --name my-service --stage prod --region eu-west-1
    svcscaffold create --interactive
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from .config import Config
from .creator import ServiceCreator
from .models import CreateOptions
from .session import CliSession
from .utils import console, print_error, print_success


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcscaffold",
        description="Scaffold a new serverless service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  svcscaffold create --name my-service\n"
            "  svcscaffold create -n my-service -s prod -r eu-west-1\n"
            "  svcscaffold create --interactive\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new service")
    create.add_argument("--name", "-n", default=None, help="Service name")
    create.add_argument(
        "--stage", "-s",
        default=None,
        help=f"Deployment stage (default: {config.default_stage})",
    )
    create.add_argument(
        "--region", "-r",
        default=None,
        help=f"Deployment region (default: {config.default_region})",
    )
    create.add_argument(
        "--interactive", "-i",
        action=argparse.BooleanOptionalAction,
        default=config.interactive,
        help="Greet and prompt for missing options (--no-interactive to disable)",
    )
    create.add_argument(
        "--template-dir",
        default=None,
        help="Directory containing the service templates",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``svcscaffold`` and ``python -m svcscaffold``."""
    config = Config.from_env()
    args = build_parser(config).parse_args(argv)

    updates: dict[str, object] = {"interactive": args.interactive}
    if args.template_dir:
        updates["template_dir"] = Path(args.template_dir)
    config = config.model_copy(update=updates)

    # Interactive sessions ask for stage/region instead of defaulting them.
    options = CreateOptions(
        name=args.name,
        stage=args.stage or (None if config.interactive else config.default_stage),
        region=args.region or (None if config.interactive else config.default_region),
    )

    creator = ServiceCreator(config, CliSession(interactive=config.interactive))
    outcome = asyncio.run(creator.run(options))

    if not outcome.success:
        print_error(str(outcome.error))
        console.print(f"[dim]Stopped at step: {outcome.failed_step}[/dim]")
        return 1

    print_success("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
