"""Loading `.license-check.yaml` and layering its policy.

The configuration file supplies the base policy. Policies given later
(the input file, then command line options) replace it field by field.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from license_check.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_check.exceptions import ConfigurationError
from license_check.logging import get_logger
from license_check.models.config import CheckConfig
from license_check.models.policy import Policy

log = get_logger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find the configuration file in a directory.

    `.license-check.yaml` is preferred over `.license-check.yml`.

    Args:
        start_dir: Directory to search. Defaults to the working directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = search_dir / name
        if candidate.is_file():
            return candidate
    return None


def _read_mapping(path: Path) -> Optional[dict[str, Any]]:
    """Parse the YAML root mapping, or None for an empty or comment-only file."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def load_config_file(path: Path) -> CheckConfig:
    """Load and validate a configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated CheckConfig. Empty files give the defaults.

    Raises:
        ConfigurationError: If the file is unreadable, is not YAML, or does
            not describe a valid configuration.
    """
    data = _read_mapping(path)
    if data is None:
        return get_default_config()

    try:
        config = CheckConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e

    log.debug(
        "configuration loaded",
        path=str(path),
        has_policy=config.policy is not None,
        project_name=config.project_name,
    )
    return config


def _format_validation_errors(error: ValidationError) -> str:
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def load_config(config_path: str | None = None) -> CheckConfig:
    """Load an explicit or discovered configuration file.

    Args:
        config_path: Path given with --config. It must exist and be valid.

    Returns:
        CheckConfig from the file, or the defaults when no file is found.

    Raises:
        ConfigurationError: If the chosen file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is None:
        return get_default_config()

    log.debug("configuration discovered", path=str(discovered))
    return load_config_file(discovered)


def layered_policy(config: CheckConfig, *overrides: Optional[Policy]) -> Policy:
    """Combine the configured policy with later overrides.

    Args:
        config: Loaded configuration; its policy is the base layer.
        *overrides: Policies applied in order. None entries are skipped.

    Returns:
        Policy where each field comes from the last layer that sets it.
    """
    policy = config.policy or Policy()
    for override in overrides:
        if override is not None:
            policy = policy.merged_with(override)
    return policy
