"""Invocation configuration for pdfspool."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

import yaml

from pdfspool.constants import BACKEND_NAMES
from pdfspool.exceptions import ConfigError, ValidationError
from pdfspool.papersize import PAPER_SIZE_TOKENS, PDF_SENTINEL


class ScalingMode(str, Enum):
    """How page content is mapped onto the paper."""

    FIT = "fit"  # Scale content to fill the paper
    ACTUAL = "actual"  # Print at native size


@dataclass(frozen=True)
class InvocationConfig:
    """Validated settings for one run of the tool.

    Attributes:
        files: PDF paths in the order they will be printed
        printer: Printer name as supplied by the user (resolved later)
        scaling: Scaling mode
        paper_size: Paper size token, ``pdf`` for the document's own size
        fast_fail: Abort the batch on the first per-file failure
        dry_run: Log jobs instead of submitting them
        backend: Print backend name, ``auto`` for the platform default
    """

    files: tuple[Path, ...]
    printer: str
    scaling: ScalingMode
    paper_size: str = PDF_SENTINEL
    fast_fail: bool = False
    dry_run: bool = False
    backend: str = "auto"


@dataclass
class Defaults:
    """Option defaults read from a YAML file; command-line values win."""

    printer: str | None = None
    scaling: str | None = None
    papersize: str | None = None
    fast_fail: bool = False
    backend: str | None = None


_DEFAULT_KEYS = {
    "printer": str,
    "scaling": str,
    "papersize": str,
    "fast_fail": bool,
    "backend": str,
}


def split_file_args(values: Iterable[str | None]) -> list[Path]:
    """Flatten repeated and comma-separated file arguments.

    Args:
        values: Raw values of every --file occurrence (None for a bare flag)

    Returns:
        Paths in order, with whitespace stripped and empty entries dropped
    """
    files = []
    for value in values:
        if not value:
            continue
        for token in value.split(","):
            token = token.strip()
            if token:
                files.append(Path(token))
    return files


def parse_scaling(value: str) -> ScalingMode:
    """Parse a scaling mode token (case-insensitive)."""
    try:
        return ScalingMode(value.strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in ScalingMode)
        raise ValidationError(f"Invalid scaling mode '{value}'. Use: {choices}") from None


def parse_paper_size(value: str) -> str:
    """Parse a paper size token (case-insensitive)."""
    token = value.strip().lower()
    if token not in PAPER_SIZE_TOKENS:
        choices = ", ".join(PAPER_SIZE_TOKENS)
        raise ValidationError(f"Invalid paper size '{value}'. Use: {choices}")
    return token


def parse_backend(value: str) -> str:
    """Parse a backend name (case-insensitive)."""
    name = value.strip().lower()
    if name not in BACKEND_NAMES:
        raise ConfigError(
            f"Unknown printer backend: '{value}'. Available: {', '.join(BACKEND_NAMES)}"
        )
    return name


def load_defaults(path: Path) -> Defaults:
    """Load option defaults from a YAML file.

    Example file::

        printer: Office_LaserJet
        scaling: fit
        papersize: a4
        fast_fail: true

    Args:
        path: Path to the YAML file

    Returns:
        Defaults with the values found in the file

    Raises:
        ConfigError: If the file is missing, unparsable, or has unknown keys or
            wrongly typed values
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return Defaults()
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration must be a mapping: {path}")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        expected = _DEFAULT_KEYS.get(key)
        if expected is None:
            allowed = ", ".join(_DEFAULT_KEYS)
            raise ConfigError(f"Unknown key '{key}' in {path}. Allowed: {allowed}")
        if not isinstance(value, expected):
            raise ConfigError(
                f"'{key}' must be a {expected.__name__}, got {type(value).__name__}",
                context={"file": path},
            )
        values[key] = value

    return Defaults(**values)
