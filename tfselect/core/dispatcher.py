"""
Maps subcommands to terraform invocations.
"""

import logging
from typing import Dict

from .path_resolver import BACKEND_VARS, TERRAFORM_VARS, var_file
from .state_store import ConfigurationRecord
from .terraform_runner import TerraformRunner

logger = logging.getLogger(__name__)

# subcommand -> basename of the variable file it passes to terraform
COMMANDS: Dict[str, str] = {
    "init": BACKEND_VARS,
    "plan": TERRAFORM_VARS,
    "destroy": TERRAFORM_VARS,
}


def dispatch(
    command: str,
    record: ConfigurationRecord,
    runner: TerraformRunner,
    check_module_dir: bool = False,
) -> int:
    """
    Resolve the variable file for a command and run terraform with it.

    Returns:
        terraform's exit code
    """
    if command not in COMMANDS:
        raise ValueError(f"Unknown command: {command}")

    path = var_file(record, COMMANDS[command], check_exists=check_module_dir)
    logger.debug(f"{command}: using {path}")

    result = getattr(runner, command)(path)
    if result.exit_code != 0:
        logger.warning(f"{result.command}: {' '.join(result.args)} exited with {result.exit_code}")
    return result.exit_code
