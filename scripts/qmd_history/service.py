"""Stop the auto-update LaunchAgent."""

import logging
import subprocess
from enum import Enum
from pathlib import Path

from qmd_history.constants import LAUNCHCTL_TIMEOUT

_logger = logging.getLogger(__name__)


class ServiceOutcome(Enum):
    STOPPED = "stopped"
    NOT_RUNNING = "not_running"
    NOT_FOUND = "not_found"


def is_agent_loaded(label: str, runner=subprocess.run) -> bool:
    """Check `launchctl list` for label."""
    result = runner(
        ['launchctl', 'list'],
        capture_output=True, text=True, check=True, timeout=LAUNCHCTL_TIMEOUT
    )
    return label in result.stdout


def stop_launch_agent(plist_path: Path, label: str, runner=subprocess.run) -> ServiceOutcome:
    """Unload the LaunchAgent registered by plist_path.

    Anything short of a clean unload (launchctl missing or not executable,
    agent not loaded, non-zero exit) is reported as NOT_RUNNING rather than an error.
    """
    try:
        if not plist_path.exists():
            return ServiceOutcome.NOT_FOUND
        if not is_agent_loaded(label, runner):
            return ServiceOutcome.NOT_RUNNING
        runner(
            ['launchctl', 'unload', str(plist_path)],
            capture_output=True, text=True, check=True, timeout=LAUNCHCTL_TIMEOUT
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
        _logger.debug(f"launchctl could not stop {label}: {e}")
        return ServiceOutcome.NOT_RUNNING
    return ServiceOutcome.STOPPED
