"""Delete installed files and directories."""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Tuple

from qmd_history.output import fail, ok, warn

_logger = logging.getLogger(__name__)


class RemovalOutcome(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class RemovalTarget:
    path: Path
    label: str


def remove_path(path: Path) -> RemovalOutcome:
    """Remove a file or directory tree. Never raises for I/O errors."""
    try:
        # a dangling symlink still counts as present
        if not path.is_symlink() and not path.exists():
            return RemovalOutcome.NOT_FOUND
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        _logger.warning(f"Failed to remove {path}: {e}")
        return RemovalOutcome.FAILED
    return RemovalOutcome.REMOVED


def report_removal(label: str, outcome: RemovalOutcome) -> None:
    if outcome is RemovalOutcome.REMOVED:
        ok(f"{label} removed")
    elif outcome is RemovalOutcome.NOT_FOUND:
        warn(f"{label} not found")
    else:
        fail(f"Failed to remove {label}")


def remove_targets(targets: Iterable[RemovalTarget]) -> List[Tuple[RemovalTarget, RemovalOutcome]]:
    """Remove each target in order; one failure does not stop the rest."""
    results = []
    for target in targets:
        outcome = remove_path(target.path)
        report_removal(target.label, outcome)
        results.append((target, outcome))
    return results
