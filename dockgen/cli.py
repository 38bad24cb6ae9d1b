"""Command-line interface.

Usage::

    dockgen /path/to/your/app
    dockgen /path/to/your/app --output ./docker
    dockgen /path/to/your/app --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from dockgen.config import Config
from dockgen.detector import ManifestParseError
from dockgen.scaffolder import DockerfileGenerator, GenerationReport, MissingInputError
from dockgen.utils import (
    console,
    print_error,
    print_lines,
    print_success,
    print_summary_table,
)

USAGE_HINT = "Usage: dockgen /path/to/your/app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockgen",
        description="Generate a Dockerfile, .dockerignore and docker-compose.yml for a project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  dockgen ./my-app\n"
            "  dockgen ./my-app --output ./docker\n"
            "  dockgen ./my-app --dry-run\n"
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the application directory",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory to write the files to (default: the application directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated files instead of writing them",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (base images, default ports, file names)",
    )
    return parser


def load_config(path: Optional[str]) -> Config:
    """Load ``--config`` if given, otherwise read ``DOCKGEN_*`` variables."""
    if path:
        return Config.load(Path(path))
    return Config.from_env()


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``dockgen`` / ``python -m dockgen``."""
    args = build_parser().parse_args(argv)

    if args.path is None:
        print_error("Error: Please provide a path to your application.")
        console.print(USAGE_HINT)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        print_error(f"Error: Invalid configuration: {exc}")
        sys.exit(1)

    generator = DockerfileGenerator(config)
    try:
        report = asyncio.run(
            generator.generate(args.path, args.output, dry_run=args.dry_run)
        )
    except MissingInputError as exc:
        print_error(f"Error: {exc}")
        console.print(USAGE_HINT)
        sys.exit(1)
    except ManifestParseError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    _print_report(report, args.path, config)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _print_report(report: GenerationReport, app_path: str, config: Config) -> None:
    console.print(f"Detected application type: [bold]{escape(report.result.label)}[/bold]")
    print_lines(report.result.evidence)

    if report.dry_run:
        names = config.output
        for filename, content, lexer in (
            (names.build_file, report.artifacts.build_file, "docker"),
            (names.ignore_file, report.artifacts.ignore_file, "text"),
            (names.compose_file, report.artifacts.compose_file, "yaml"),
        ):
            console.print(Panel(Syntax(content, lexer), title=escape(filename), expand=False))
        return

    for filename, path in report.written.items():
        console.print(f"Created {escape(filename)} at: {escape(str(path))}")

    params = report.parameters
    print_summary_table(
        {
            "Service": params.service_name,
            "Port": str(params.compose_port),
            "Start script": params.start_token or "-",
            "Build script": params.build_token or "-",
        },
        title="Generated configuration",
    )

    port = params.compose_port
    print_success("Dockerization complete! You can now build and run your Docker container with:")
    console.print(f"  cd {escape(app_path)}")
    console.print("  docker build -t my-app .")
    console.print(f"  docker run -p {port}:{port} my-app")
    console.print("\nOr use Docker Compose:")
    console.print("  docker-compose up")


if __name__ == "__main__":
    main()
