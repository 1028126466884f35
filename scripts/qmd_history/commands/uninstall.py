"""Uninstall command for qmd-history."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from qmd_history.config import UninstallPaths, display_path, resolve_paths
from qmd_history.constants import LAUNCH_AGENT_LABEL, PRODUCT_NAME
from qmd_history.output import (
    clear_screen,
    confirm,
    error,
    fail,
    heading,
    ok,
    print_box,
    print_list,
    print_step,
    select_many,
    success,
    warn,
    warning,
)
from qmd_history.remover import (
    RemovalOutcome,
    RemovalTarget,
    remove_path,
    remove_targets,
)
from qmd_history.scanner import Integration, scan_integrations
from qmd_history.service import ServiceOutcome, stop_launch_agent
from qmd_history.stripper import strip_config_file

_logger = logging.getLogger(__name__)


@dataclass
class UninstallReport:
    """What an uninstall run did."""
    cancelled: bool = False
    service: Optional[ServiceOutcome] = None
    removals: List[Tuple[RemovalTarget, RemovalOutcome]] = field(default_factory=list)
    configs: Dict[str, bool] = field(default_factory=dict)  # integration id -> stripped
    history: Optional[RemovalOutcome] = None


def removal_targets(paths: UninstallPaths) -> List[RemovalTarget]:
    """Fixed removal list. The plist comes first, after the agent is stopped."""
    return [
        RemovalTarget(paths.launch_agent, "LaunchAgent plist"),
        RemovalTarget(paths.converter_script, "Converter script"),
        RemovalTarget(paths.skill_dir, "Skill directory"),
    ]


def print_intro() -> None:
    clear_screen()
    print_box(f"{PRODUCT_NAME} Uninstaller")

    print_list("What Will Be Removed", [
        (error("✗"), "LaunchAgent (auto-updates)"),
        (error("✗"), "Converter script"),
        (error("✗"), "Skill files"),
        (warning("?"), "AI assistant configurations (optional)"),
        (warning("?"), "Converted history (optional)"),
    ])
    print_list("What Will Be Preserved", [
        (success("✓"), "Original JSONL files in ~/.claude/projects/"),
        (success("✓"), "QMD collections (manual removal required)"),
    ])


def stop_services(paths: UninstallPaths) -> ServiceOutcome:
    print_step("Step 1: Stopping Services")
    outcome = stop_launch_agent(paths.launch_agent, LAUNCH_AGENT_LABEL)
    if outcome is ServiceOutcome.STOPPED:
        ok("LaunchAgent stopped")
    elif outcome is ServiceOutcome.NOT_RUNNING:
        warn("LaunchAgent not running")
    else:
        warn("LaunchAgent not found")
    return outcome


def remove_files(paths: UninstallPaths) -> List[Tuple[RemovalTarget, RemovalOutcome]]:
    print_step("Step 2: Removing Files")
    return remove_targets(removal_targets(paths))


def strip_integration(integration: Integration) -> bool:
    """Strip one assistant config, reporting the result. True on success."""
    try:
        result = strip_config_file(integration.config_path)
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning(f"Failed to update {integration.config_path}: {e}")
        fail(f"Failed to remove {integration.name} configuration")
        return False

    ok(f"{integration.name} configuration removed")
    if result.backup_path is not None:
        print(f"  Backup: {result.backup_path}")
    return True


def remove_configs(paths: UninstallPaths) -> Dict[str, bool]:
    """Offer to strip the section from each assistant config that has it."""
    integrations = scan_integrations(paths)
    if not integrations:
        return {}

    print_step("Step 3: AI Assistant Configurations")
    selected = select_many(
        "Select which AI assistant configurations to remove:",
        [f"{i.name} ({i.config_path})" for i in integrations],
    )

    results: Dict[str, bool] = {}
    for index in selected:
        integration = integrations[index]
        results[integration.id] = strip_integration(integration)
    return results


def remove_converted_history(paths: UninstallPaths) -> Optional[RemovalOutcome]:
    history = paths.converted_history
    try:
        present = history.exists()
    except OSError as e:
        _logger.warning(f"Cannot inspect {history}: {e}")
        print_step("Step 4: Converted History")
        fail("Failed to check converted history")
        return RemovalOutcome.FAILED
    if not present:
        return None

    print_step("Step 4: Converted History")
    if not confirm(f"Remove converted history at {display_path(history, paths.home)}?"):
        ok("Preserving converted history")
        return None

    outcome = remove_path(history)
    if outcome is RemovalOutcome.REMOVED:
        ok("Converted history removed")
    elif outcome is RemovalOutcome.NOT_FOUND:
        warn("Converted history not found")
    else:
        fail("Failed to remove converted history")
    return outcome


def print_completion() -> None:
    print()
    print_box("Uninstallation Complete!")

    print_list("What Was Removed", [
        (success("✓"), "LaunchAgent (auto-updates)"),
        (success("✓"), "Converter script"),
        (success("✓"), "Skill files"),
    ])

    print(heading("Reminder"))
    print("To remove QMD collections manually:")
    print("  qmd collection list")
    print("  qmd collection remove <name>")
    print()

    print(heading("To Reinstall"))
    print("  ./install.sh")
    print()


def cmd_uninstall(args: Any, paths: Optional[UninstallPaths] = None) -> UninstallReport:
    """Interactively remove the qmd-history integration."""
    if paths is None:
        paths = resolve_paths()
    report = UninstallReport()

    print_intro()
    if not confirm("Continue with uninstallation?"):
        print(warning("Uninstallation cancelled."))
        report.cancelled = True
        return report

    # Agent must be unloaded before its plist is deleted
    report.service = stop_services(paths)
    report.removals = remove_files(paths)
    report.configs = remove_configs(paths)
    report.history = remove_converted_history(paths)

    print_completion()
    return report
