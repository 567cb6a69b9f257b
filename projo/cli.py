"""Command-line entry point for projo.

Commands:
    gen / generate   Generate a new Go project
    version          Show version information
    help             Show usage

The CLI is the only layer that prints or exits: it builds the configuration,
shows a summary, asks for confirmation and turns any ``ScaffoldError`` into a
red message and exit status 1.
"""

from __future__ import annotations

import argparse
import sys

from projo import __version__
from projo.config import Defaults, build_project_config
from projo.errors import ScaffoldError
from projo.scaffolder import ProjectGenerator, available_archetypes
from projo.utils import (
    confirm,
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_tree,
    print_warning,
)


_EXAMPLES = (
    "Examples:\n"
    "  projo gen --name myapi --module github.com/user/myapi --type api\n"
    "  projo gen --name mytool --module github.com/user/mytool --type cli\n"
    "  projo gen --name myservice --module github.com/user/myservice --type microservice"
    ' --desc "My awesome service"\n'
    '  projo gen --name mylib --module github.com/user/mylib --type library --author "Your Name"\n'
    "  projo gen --name myapi --module github.com/user/myapi --output ~/projects\n"
)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def generate_cmd(args: argparse.Namespace) -> int:
    try:
        config = build_project_config(
            name=args.name,
            module=args.module,
            archetype=args.type,
            description=args.desc,
            author=args.author,
            go_version=args.go_version,
            output_path=args.output,
        )
    except ScaffoldError as exc:
        print_error(f"{exc}\n\nRun 'projo gen --help' for usage")
        return 1

    generator = ProjectGenerator(config)

    print_header("Go Project Generator")
    print_summary_table(generator.describe(), title="Project")

    if not args.yes and not confirm("Generate project?"):
        print_warning("Generation cancelled")
        return 0

    console.print("Generating project...")
    try:
        result = generator.generate()
    except ScaffoldError as exc:
        print_error(f"failed to generate project: {exc}")
        return 1

    print_success("✓ Project generated successfully!")
    console.print(f"  {result.directory_count} directories, {result.file_count} files")
    if args.verbose:
        print_tree(result.project_root, [*result.directories, *result.files])

    console.print()
    console.print("Next steps:")
    console.print(f"  cd {result.project_root}")
    console.print("  go mod tidy")
    console.print("  make build")
    return 0


def version_cmd(args: argparse.Namespace) -> int:
    console.print(f"projo version {__version__}")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _archetype_help() -> str:
    lines = ["Project Types:"]
    for tag, description in available_archetypes().items():
        lines.append(f"  {tag:<13} {description}")
    return "\n".join(lines)


def _build_parser(defaults: Defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projo",
        description="projo - Go Project Structure Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EXAMPLES,
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"projo version {__version__}",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    gen = sub.add_parser(
        "gen",
        aliases=["generate"],
        help="Generate a new Go project",
        description="Generate a new Go project structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_archetype_help() + "\n\n" + _EXAMPLES,
    )
    gen.add_argument("--name", default="", help="Project name (required)")
    gen.add_argument("--module", default="", help="Go module path (required)")
    gen.add_argument(
        "--type", "-t",
        default=defaults.archetype,
        help=f"Project type: api, cli, microservice, library (default: {defaults.archetype})",
    )
    gen.add_argument("--desc", default="", help="Project description")
    gen.add_argument("--author", default=defaults.author, help="Author name")
    gen.add_argument(
        "--go-version",
        default=defaults.go_version,
        help=f"Go version (default: {defaults.go_version})",
    )
    gen.add_argument(
        "--output", "-o",
        default=defaults.output_dir,
        help=f"Output directory path (default: {defaults.output_dir})",
    )
    gen.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    gen.add_argument("--verbose", action="store_true", help="List every generated path")
    gen.set_defaults(func=generate_cmd)

    ver = sub.add_parser("version", help="Show version information")
    ver.set_defaults(func=version_cmd)

    help_ = sub.add_parser("help", help="Show this help message")
    help_.set_defaults(func=lambda _args: _print_help(parser))

    return parser


def _print_help(parser: argparse.ArgumentParser) -> int:
    parser.print_help()
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``projo`` and ``python -m projo``."""
    parser = _build_parser(Defaults.from_env())
    args = parser.parse_args(argv)
    if getattr(args, "func", None) is None:
        return _print_help(parser)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
