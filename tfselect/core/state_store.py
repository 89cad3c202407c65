"""
Per-repository persistence of the configuration record.

Each git repository gets one TOML file in the state directory. The file
name is the repository's absolute path with every "/" replaced by "%",
so /home/me/infra becomes %home%me%infra.toml.

There is no locking: two concurrent runs against the same repository
can race on the read/write of the same file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from .errors import StateFileError

logger = logging.getLogger(__name__)

APP_NAME = "tfselect"
PATH_SEPARATOR_SENTINEL = "%"
STATE_FILE_EXTENSION = ".toml"

DEFAULT_REGION = "us-east-1"
DEFAULT_INFRA_DIR = "../../"
DEFAULT_MODULE = "vpc"


def get_state_dir() -> Path:
    """
    Get platform-specific state directory.

    Returns:
        Path to the application's state directory
    """
    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_STATE_HOME', os.path.expanduser('~/.local/state'))
    return Path(base) / APP_NAME


@dataclass
class ConfigurationRecord:
    """The selections remembered for one repository."""
    region: str
    module: str
    infra_dir: str
    environment: Optional[str] = None

    @classmethod
    def default(cls, cwd: Path) -> "ConfigurationRecord":
        """Fresh record for a repository seen for the first time."""
        return cls(
            region=DEFAULT_REGION,
            module=Path(cwd).name or DEFAULT_MODULE,
            infra_dir=DEFAULT_INFRA_DIR,
            environment=None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form. TOML has no null, so an unset environment is omitted."""
        data: Dict[str, Any] = {}
        if self.environment is not None:
            data["environment"] = self.environment
        data["region"] = self.region
        data["module"] = self.module
        data["infra_dir"] = self.infra_dir
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigurationRecord":
        """
        Build a record from parsed TOML.

        Raises:
            StateFileError: If a required field is missing or not a string
        """
        for key in ("region", "module", "infra_dir"):
            if not isinstance(data.get(key), str):
                raise StateFileError(f"State field {key!r} is missing or not a string")

        environment = data.get("environment")
        if environment is not None and not isinstance(environment, str):
            raise StateFileError("State field 'environment' is not a string")

        return cls(
            region=data["region"],
            module=data["module"],
            infra_dir=data["infra_dir"],
            environment=environment,
        )


class StateStore:
    """
    Reads and writes configuration records keyed by repository root.

    Records are always written wholesale; there are no partial updates.
    """

    def __init__(self, state_dir: Optional[Path] = None):
        self.state_dir = Path(state_dir) if state_dir else get_state_dir()

    def state_path(self, repo_root: Path) -> Path:
        """Path of the state file for a repository root."""
        filename = str(repo_root).replace("/", PATH_SEPARATOR_SENTINEL)
        return self.state_dir / (filename + STATE_FILE_EXTENSION)

    def load(self, repo_root: Path, cwd: Path) -> ConfigurationRecord:
        """
        Load the record for a repository, creating a default one if absent.

        Args:
            repo_root: Absolute path of the enclosing git repository
            cwd: Current working directory, seeds the default module name

        Returns:
            The stored (or freshly created) record

        Raises:
            StateFileError: If the existing file is not a valid record
            OSError: If the state directory or file cannot be accessed
        """
        self.state_dir.mkdir(parents=True, exist_ok=True)
        path = self.state_path(repo_root)

        if not path.exists():
            record = ConfigurationRecord.default(cwd)
            logger.info(f"No state for {repo_root}, creating {path}")
            self.save(repo_root, record)
            return record

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = toml.load(f)
        except (toml.TomlDecodeError, UnicodeDecodeError) as e:
            raise StateFileError(f"Malformed state file {path}: {e}") from e

        record = ConfigurationRecord.from_dict(data)
        logger.debug(f"Loaded state from {path}: {record}")
        return record

    def save(self, repo_root: Path, record: ConfigurationRecord):
        """Serialize the record and overwrite the repository's state file."""
        path = self.state_path(repo_root)
        with open(path, 'w', encoding='utf-8') as f:
            toml.dump(record.to_dict(), f)
        logger.debug(f"Saved state to {path}")
