"""Options building for tolgee-puller.

This module merges command-line flags over environment settings and turns
the result into a validated, immutable PullerOptions record.
"""

import logging
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import SettingsError

from ..utils.cli.args import ParsedArgs
from ..utils.core.exceptions import ConfigurationError
from .schema import DEFAULT_API_URL, DEFAULT_OUTPUT_PATH, OutputMode, PullerOptions
from .settings import EnvironmentSettings

logger = logging.getLogger(__name__)


def build_options(
    args: ParsedArgs,
    settings: EnvironmentSettings,
    cwd: Path | None = None,
) -> PullerOptions:
    """
    Build the options record for one pull.

    Command-line values take precedence over environment values. When only
    one namespace is requested it becomes the default namespace.

    Args:
        args: Parsed command-line arguments
        settings: Environment settings
        cwd: Directory relative output paths are resolved against

    Returns:
        PullerOptions: Validated options

    Raises:
        ConfigurationError: If the options are incomplete or inconsistent
    """
    api_key = args.api_key or settings.api_key
    api_url = args.api_url or settings.api_url or DEFAULT_API_URL
    languages = args.languages or settings.languages or []
    namespaces = args.namespaces or settings.namespaces or []
    default_namespace = args.default_namespace or settings.default_namespace or None

    if not api_key:
        raise ConfigurationError("No API key specified.")

    if not namespaces:
        raise ConfigurationError("No namespaces specified.")

    if default_namespace and default_namespace not in namespaces:
        raise ConfigurationError(
            "The option `default_namespace` should be one of the specified namespaces."
        )

    # With a single namespace there is nothing to disambiguate, so it is
    # always flattened into the language root.
    if len(namespaces) == 1:
        default_namespace = namespaces[0]

    output_path = args.output or DEFAULT_OUTPUT_PATH
    if not output_path.is_absolute():
        output_path = (cwd or Path.cwd()) / output_path

    try:
        options = PullerOptions(
            api_key=api_key,
            api_url=api_url,
            languages=tuple(languages),
            namespaces=tuple(namespaces),
            default_namespace=default_namespace,
            output_path=output_path,
            mode=OutputMode.SPLIT if args.split else OutputMode.SINGLE,
            pretty=args.pretty,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid options: {e}") from e

    logger.debug(
        "Options: api_url=%s languages=%s namespaces=%s default_namespace=%s output=%s mode=%s",
        options.api_url,
        list(options.languages) or "(server default)",
        list(options.namespaces),
        options.default_namespace,
        options.output_path,
        options.mode.value,
    )
    return options


def load_environment_settings() -> EnvironmentSettings:
    """
    Read the ``TOLGEE_*`` environment once at process entry.

    Raises:
        ConfigurationError: If an environment value cannot be parsed
    """
    try:
        return EnvironmentSettings()
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(f"Invalid TOLGEE_* environment: {e}") from e
