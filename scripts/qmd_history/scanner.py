"""Detect which AI assistant configs carry the qmd-history integration."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from qmd_history.config import UninstallPaths
from qmd_history.constants import INTEGRATIONS

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrationSpec:
    """A known assistant and how to tell whether we were installed into it."""

    name: str
    id: str
    relative_path: Tuple[str, ...]
    sentinel: Optional[str]


@dataclass(frozen=True)
class Integration:
    """An assistant config found to contain the integration."""

    name: str
    id: str
    config_path: Path
    exists: bool = True


KNOWN_INTEGRATIONS = tuple(IntegrationSpec(*row) for row in INTEGRATIONS)


def is_installed(config_path: Path, sentinel: Optional[str]) -> bool:
    """True if config_path exists and (when given) contains sentinel.

    Unreadable files count as not installed.
    """
    try:
        if not config_path.is_file():
            return False
        if sentinel is None:
            return True
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _logger.debug(f"Skipping unreadable config {config_path}: {e}")
        return False
    return sentinel in content


def scan_integrations(
    paths: UninstallPaths,
    specs: Sequence[IntegrationSpec] = KNOWN_INTEGRATIONS,
) -> List[Integration]:
    """Return installed integrations in fixed scan order."""
    found: List[Integration] = []
    seen = set()
    for spec in specs:
        if spec.id in seen:
            continue
        config_path = paths.under_home(*spec.relative_path)
        if is_installed(config_path, spec.sentinel):
            found.append(Integration(spec.name, spec.id, config_path))
            seen.add(spec.id)
    return found
