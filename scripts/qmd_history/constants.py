"""Constants for the qmd-history uninstaller."""

VERSION = "1.0.0"

PRODUCT_NAME = "QMD History Search"

# LaunchAgent that runs the periodic history conversion
LAUNCH_AGENT_LABEL = "com.user.qmd-claude-history"
LAUNCH_AGENT_FILE = f"{LAUNCH_AGENT_LABEL}.plist"

# Installed artifacts (relative to home)
LAUNCH_AGENTS_DIR = ("Library", "LaunchAgents")
CONVERTER_SCRIPT = (".local", "bin", "convert-claude-history.sh")
SKILL_DIR = (".claude", "skills", "qmd-claude-history")
CONVERTED_HISTORY_DIR = (".claude", "converted-history")

# Assistant config files: (name, id, path relative to home, sentinel)
# A sentinel of None means the file belongs to us and presence is enough.
INTEGRATIONS = (
    ("Claude Code", "claude", (".claude", "CLAUDE.md"), "qmd-claude-history"),
    ("Amp", "amp", (".config", "amp", "AGENTS.md"), "qmd-history"),
    ("Opencode", "opencode", (".config", "opencode", "agents", "qmd-history.md"), None),
)

# Section stripping
SECTION_MARKERS = ("Memory & Context Retrieval", "QMD History Search")
# A heading mentioning any of these does not end the section
SECTION_KEEP_KEYWORDS = ("QMD", "Memory")
HEADING_PREFIX = "## "

BACKUP_SUFFIX = ".backup"

LAUNCHCTL_TIMEOUT = 10
