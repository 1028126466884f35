#!/usr/bin/env python3
"""
QMD History Search Uninstaller.

Removes what install.sh set up for Claude history search:

    ~/Library/LaunchAgents/com.user.qmd-claude-history.plist   # auto-updates
    ~/.local/bin/convert-claude-history.sh                     # converter
    ~/.claude/skills/qmd-claude-history/                       # skill files

and optionally the qmd section in AI assistant configs and
~/.claude/converted-history/.

Usage:
    ./scripts/qmd-history-uninstall.py [--no-color] [--verbose]
"""

import sys
from pathlib import Path

VERSION = "1.0.0"

# Run from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent))

from qmd_history.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
