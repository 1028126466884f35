"""Ensure VERSION stays in sync across all files that declare it."""

import re
from pathlib import Path


REPO_ROOT = Path(__file__).parent.parent
ENTRY_POINT = REPO_ROOT / "scripts" / "qmd-history-uninstall.py"
PYPROJECT = REPO_ROOT / "pyproject.toml"


def _extract_literal_version(path: Path, name: str = "VERSION") -> str:
    """Return the first NAME = '...' literal found in a file."""
    text = path.read_text()
    m = re.search(rf'^{name}\s*=\s*["\']([^"\']+)["\']', text, re.MULTILINE)
    assert m, f"No literal {name} = '...' found in {path}"
    return m.group(1)


class TestVersionConsistency:
    def test_entry_point_matches_constants(self) -> None:
        """scripts/qmd-history-uninstall.py literal VERSION must match constants.py."""
        from qmd_history.constants import VERSION as canonical

        literal = _extract_literal_version(ENTRY_POINT)
        assert literal == canonical, (
            f"scripts/qmd-history-uninstall.py has VERSION = '{literal}' but "
            f"qmd_history/constants.py has VERSION = '{canonical}'. "
            "Update the literal in scripts/qmd-history-uninstall.py to match."
        )

    def test_pyproject_matches_constants(self) -> None:
        from qmd_history.constants import VERSION as canonical

        assert _extract_literal_version(PYPROJECT, "version") == canonical
