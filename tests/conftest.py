"""Shared fixtures for qmd-history tests."""

from pathlib import Path
from typing import Generator

import pytest

from qmd_history.config import UninstallPaths, resolve_paths
from qmd_history.output import Colors

CLAUDE_MD = """# Global instructions

Prefer small commits.

## Memory & Context Retrieval

Use the qmd-claude-history skill to search past sessions:

    qmd search "query" -c claude-history

## Code Style

Use 4 spaces.
"""

AMP_AGENTS_MD = """# Amp agents

## QMD History Search

Search converted history with qmd-history.

## Tools
- ripgrep
"""

OPENCODE_AGENT_MD = """## QMD History Search

Agent description for qmd-history.
"""


@pytest.fixture(autouse=True)
def no_colors() -> Generator[None, None, None]:
    """Run every test with plain output."""
    saved = {name: getattr(Colors, name) for name in ("RESET", "RED", "GREEN", "YELLOW", "CYAN", "BOLD")}
    Colors.disable()
    yield
    for name, value in saved.items():
        setattr(Colors, name, value)
    Colors._enabled = True


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """An empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def paths(fake_home: Path) -> UninstallPaths:
    return resolve_paths(fake_home)


@pytest.fixture
def installed_home(paths: UninstallPaths) -> UninstallPaths:
    """A home directory with every artifact the installer creates."""
    paths.launch_agent.parent.mkdir(parents=True)
    paths.launch_agent.write_text("<plist/>\n")

    paths.converter_script.parent.mkdir(parents=True)
    paths.converter_script.write_text("#!/bin/bash\n")

    paths.skill_dir.mkdir(parents=True)
    (paths.skill_dir / "SKILL.md").write_text("# qmd-claude-history\n")

    paths.converted_history.mkdir(parents=True)
    (paths.converted_history / "session.md").write_text("converted\n")

    claude_md = paths.under_home(".claude", "CLAUDE.md")
    claude_md.write_text(CLAUDE_MD)

    amp_md = paths.under_home(".config", "amp", "AGENTS.md")
    amp_md.parent.mkdir(parents=True)
    amp_md.write_text(AMP_AGENTS_MD)

    opencode_md = paths.under_home(".config", "opencode", "agents", "qmd-history.md")
    opencode_md.parent.mkdir(parents=True)
    opencode_md.write_text(OPENCODE_AGENT_MD)

    return paths
