"""
Error types raised by tfselect.

Anything derived from TfSelectError is fatal: the CLI prints the
message and exits non-zero. Nothing is retried.
"""


class TfSelectError(Exception):
    """Base class for all tfselect failures."""
    pass


class ModuleError(TfSelectError):
    """A module path could not be resolved from the configuration record."""
    pass


class NotADirectory(ModuleError):
    """The resolved module directory does not exist."""

    def __init__(self, environment: str, region: str):
        self.environment = environment
        self.region = region
        super().__init__(
            f"Module not found for environment: {environment!r}, region: {region!r}"
        )


class IncompleteConfig(ModuleError):
    """A required selection was never made."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Config value {field!r} must be set")


class StateFileError(TfSelectError):
    """The persisted state file is malformed."""
    pass


class GitRepositoryError(TfSelectError):
    """The working directory is not inside a git repository."""
    pass


class TerraformNotFoundError(TfSelectError):
    """The terraform binary could not be launched."""
    pass


class PromptCancelled(TfSelectError):
    """A free-text prompt was aborted by the user."""
    pass
