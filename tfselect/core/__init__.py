"""
Core functionality for tfselect.

- Persisting the per-repository configuration record
- Discovering environments and regions from the infra directory tree
- Resolving variable file paths
- Executing Terraform commands
"""

from .errors import (
    TfSelectError,
    ModuleError,
    NotADirectory,
    IncompleteConfig,
    StateFileError,
    GitRepositoryError,
    TerraformNotFoundError,
    PromptCancelled,
)
from .state_store import ConfigurationRecord, StateStore
from .directory_scanner import list_subdirectories, build_choices
from .path_resolver import module_dir, var_file
from .terraform_runner import TerraformRunner, CommandResult
from .dispatcher import dispatch, COMMANDS
from .git import get_repo_root

__all__ = [
    "TfSelectError",
    "ModuleError",
    "NotADirectory",
    "IncompleteConfig",
    "StateFileError",
    "GitRepositoryError",
    "TerraformNotFoundError",
    "PromptCancelled",
    "ConfigurationRecord",
    "StateStore",
    "list_subdirectories",
    "build_choices",
    "module_dir",
    "var_file",
    "TerraformRunner",
    "CommandResult",
    "dispatch",
    "COMMANDS",
    "get_repo_root",
]
