"""Path resolution for the qmd-history uninstaller."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from qmd_history.constants import (
    CONVERTED_HISTORY_DIR,
    CONVERTER_SCRIPT,
    LAUNCH_AGENT_FILE,
    LAUNCH_AGENTS_DIR,
    SKILL_DIR,
)


@dataclass(frozen=True)
class UninstallPaths:
    """Every location the uninstaller touches, rooted at one home directory."""

    home: Path
    launch_agent: Path
    converter_script: Path
    skill_dir: Path
    converted_history: Path

    def under_home(self, *parts: str) -> Path:
        return self.home.joinpath(*parts)


def resolve_paths(home: Optional[Path] = None) -> UninstallPaths:
    """Build UninstallPaths from ``home`` (defaults to the user's home)."""
    home = Path(home) if home is not None else Path.home()
    return UninstallPaths(
        home=home,
        launch_agent=home.joinpath(*LAUNCH_AGENTS_DIR, LAUNCH_AGENT_FILE),
        converter_script=home.joinpath(*CONVERTER_SCRIPT),
        skill_dir=home.joinpath(*SKILL_DIR),
        converted_history=home.joinpath(*CONVERTED_HISTORY_DIR),
    )


def display_path(path: Path, home: Path) -> str:
    """Render ``path`` with ``~`` in place of the home directory."""
    try:
        return "~/" + str(path.relative_to(home))
    except ValueError:
        return str(path)
