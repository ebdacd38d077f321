"""
Command-line argument parsing for tolgee-puller.

Every option is optional on the command line; missing values are filled in
from the environment when the options record is built.
"""

import argparse
from pathlib import Path
from typing import NamedTuple

from ...config.schema import DEFAULT_OUTPUT_PATH
from ..core.version import get_version


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    command: str
    api_key: str | None
    api_url: str | None
    languages: list[str] | None
    namespaces: list[str] | None
    default_namespace: str | None
    output: Path | None
    split: bool
    pretty: bool
    verbose: bool


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for tolgee-puller.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="tolgee-puller",
        description="Pull translations from Tolgee into a generated TypeScript module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tolgee-puller generate --namespaces common
    Pull every language of the "common" namespace

  tolgee-puller gen --languages en de --namespaces common errors --default-namespace common
    Pull two languages, merging "common" keys at the language root

  tolgee-puller gen --namespaces common --split --output src/locales/messages.ts
    Write src/locales/en.ts, src/locales/de.ts, ...
""",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    generate = subparsers.add_parser(
        "generate", aliases=["gen"], help="Generate locale messages"
    )

    _ = generate.add_argument(
        "--api-key",
        default=None,
        help="The Personal Access Token or a Project API Key (env: TOLGEE_API_KEY).",
    )
    _ = generate.add_argument(
        "--api-url",
        default=None,
        help="The API url of your Tolgee (self-hosted) server (env: TOLGEE_API_URL).",
    )
    _ = generate.add_argument(
        "--languages",
        nargs="+",
        default=None,
        metavar="TAG",
        help="The language(s) that need to be fetched (env: TOLGEE_LANGUAGES).",
    )
    _ = generate.add_argument(
        "--namespaces",
        nargs="+",
        default=None,
        metavar="NS",
        help="The namespaces that need to be fetched (env: TOLGEE_NAMESPACES).",
    )
    _ = generate.add_argument(
        "--default-namespace",
        default=None,
        metavar="NS",
        help="The default namespace of the project (env: TOLGEE_DEFAULT_NAMESPACE).",
    )
    _ = generate.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="PATH",
        help=f"Path of the generated module (default: {DEFAULT_OUTPUT_PATH}).",
    )
    _ = generate.add_argument(
        "--split",
        action="store_true",
        help="Write one module per language next to the output path.",
    )
    _ = generate.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the generated resources.",
    )
    _ = generate.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs with the raw, not yet validated values

    Raises:
        SystemExit: If argument parsing fails or --help is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    return ParsedArgs(
        command=str(getattr(parsed, "command")),
        api_key=getattr(parsed, "api_key", None),
        api_url=getattr(parsed, "api_url", None),
        languages=getattr(parsed, "languages", None),
        namespaces=getattr(parsed, "namespaces", None),
        default_namespace=getattr(parsed, "default_namespace", None),
        output=getattr(parsed, "output", None),
        split=bool(getattr(parsed, "split", False)),
        pretty=bool(getattr(parsed, "pretty", False)),
        verbose=bool(getattr(parsed, "verbose", False)),
    )
