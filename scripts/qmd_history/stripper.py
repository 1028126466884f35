"""Remove the qmd-history section from assistant config files."""

import logging
import shutil
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from qmd_history.constants import (
    BACKUP_SUFFIX,
    HEADING_PREFIX,
    SECTION_KEEP_KEYWORDS,
    SECTION_MARKERS,
)

_logger = logging.getLogger(__name__)


class SectionState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass
class StripResult:
    path: Path
    backup_path: Optional[Path]
    lines_removed: int


def next_state(
    state: SectionState,
    line: str,
    markers: Sequence[str] = SECTION_MARKERS,
    keep_keywords: Sequence[str] = SECTION_KEEP_KEYWORDS,
) -> SectionState:
    """Transition for one line.

    A marker line always enters the section. While inside, a "## " heading
    that mentions none of keep_keywords leaves it.
    """
    if any(marker in line for marker in markers):
        return SectionState.INSIDE
    if (
        state is SectionState.INSIDE
        and line.startswith(HEADING_PREFIX)
        and not any(keyword in line for keyword in keep_keywords)
    ):
        return SectionState.OUTSIDE
    return state


def strip_section(
    lines: Iterable[str],
    markers: Sequence[str] = SECTION_MARKERS,
    keep_keywords: Sequence[str] = SECTION_KEEP_KEYWORDS,
) -> List[str]:
    """Drop every line seen while inside the section.

    The heading that closes the section is kept. A section that never
    closes runs to the end of the input.
    """
    state = SectionState.OUTSIDE
    kept: List[str] = []
    for line in lines:
        state = next_state(state, line, markers, keep_keywords)
        if state is SectionState.OUTSIDE:
            kept.append(line)
    return kept


def strip_section_text(text: str, **kwargs) -> str:
    return "\n".join(strip_section(text.split("\n"), **kwargs))


def backup_path_for(path: Path, now_ms: Optional[int] = None) -> Path:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return path.with_name(f"{path.name}{BACKUP_SUFFIX}.{now_ms}")


def backup_file(path: Path, now_ms: Optional[int] = None) -> Optional[Path]:
    """Copy path next to itself with a millisecond timestamp suffix.

    Best effort: returns None instead of raising when the copy fails.
    """
    target = backup_path_for(path, now_ms)
    try:
        shutil.copyfile(path, target)
    except OSError as e:
        _logger.warning(f"Could not back up {path}: {e}")
        return None
    _logger.debug(f"Backed up {path} to {target}")
    return target


def strip_config_file(path: Path, now_ms: Optional[int] = None) -> StripResult:
    """Back up path, then rewrite it without the qmd-history section.

    Raises OSError / UnicodeDecodeError if the file cannot be read or written.
    """
    backup = backup_file(path, now_ms)

    # newline="" keeps CRLF files byte-identical outside the section
    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()
    lines = content.split("\n")
    kept = strip_section(lines)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write("\n".join(kept))

    removed = len(lines) - len(kept)
    _logger.debug(f"Removed {removed} lines from {path}")
    return StripResult(path=path, backup_path=backup, lines_removed=removed)
