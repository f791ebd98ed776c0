from pathlib import Path

import yaml
from pydantic import ValidationError

from entrypoint_lister.core.errors import OptionsError
from entrypoint_lister.rules.models import ListerOptions


def load_options(path: Path) -> ListerOptions:
    """
    Load and validate an options file.
    Raises FileNotFoundError if file missing.
    Raises OptionsError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Options file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise OptionsError(f"Invalid YAML syntax in options file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"Options file must contain a mapping, got {type(data).__name__}")

    return parse_options(data)


def parse_options(data: dict) -> ListerOptions:
    """Validate an options mapping (camelCase or snake_case keys)."""
    try:
        return ListerOptions.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise OptionsError(f"Options validation failed:\n{e}") from e
