"""
Terraform command execution.

Commands run in the foreground with stdin/stdout/stderr inherited from
tfselect, so terraform can prompt (destroy confirmation) and its output
is shown unmodified. The full command line is echoed before launch.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Union

import click

from .errors import TerraformNotFoundError
from ..utils.validators import validate_terraform_installed

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class CommandResult:
    """Result of a Terraform command execution."""
    exit_code: int
    command: str  # operation name (e.g. "init", "plan")
    args: List[str]


class TerraformRunner:
    """Runs terraform init/plan/destroy with a resolved variable file."""

    def __init__(
        self,
        terraform_binary: str = "terraform",
        echo: Callable[[str], None] = click.echo,
    ):
        self.terraform_binary = terraform_binary
        self._echo = echo

    def init(self, backend_file: PathLike) -> CommandResult:
        """Run terraform init against a backend config file."""
        args = [
            "init",
            "-get=true",
            "-force-copy",
            "-backend-config",
            str(backend_file),
            "-reconfigure",
        ]
        return self._execute(args, "init")

    def plan(self, var_file: PathLike) -> CommandResult:
        """Run terraform plan, writing the plan to ./plan.plan."""
        args = [
            "plan",
            "-var-file",
            str(var_file),
            "-out=./plan.plan",
            "-lock-timeout=30s",
        ]
        return self._execute(args, "plan")

    def destroy(self, var_file: PathLike) -> CommandResult:
        """Run terraform destroy."""
        args = ["destroy", "-var-file", str(var_file)]
        return self._execute(args, "destroy")

    def _execute(self, args: List[str], operation: str) -> CommandResult:
        """
        Echo and run a terraform command, waiting for it to exit.

        Raises:
            TerraformNotFoundError: If the binary cannot be launched
        """
        cmd = [self.terraform_binary] + args
        command_line = " ".join(cmd)

        self._echo(command_line)
        logger.debug(f"Running: {cmd}")

        if not validate_terraform_installed(self.terraform_binary):
            raise TerraformNotFoundError(f"{self.terraform_binary} not found on PATH")

        try:
            completed = subprocess.run(cmd, shell=False)
        except OSError as e:
            raise TerraformNotFoundError(f"Failed to run {self.terraform_binary}: {e}") from e

        logger.info(f"terraform {operation} exited with {completed.returncode}")
        return CommandResult(exit_code=completed.returncode, command=operation, args=cmd)
