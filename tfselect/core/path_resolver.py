"""
Builds module directory and variable file paths from a configuration record.

    <infra_dir>/<environment>/<region>/<module>/<basename>.tfvars
"""

from pathlib import Path

from .errors import IncompleteConfig, NotADirectory
from .state_store import ConfigurationRecord

BACKEND_VARS = "backend"
TERRAFORM_VARS = "terraform"
VAR_FILE_EXTENSION = ".tfvars"


def module_dir(record: ConfigurationRecord, check_exists: bool = False) -> Path:
    """
    Resolve the module directory for a record.

    Args:
        record: Configuration record
        check_exists: Raise NotADirectory if the directory is missing

    Raises:
        IncompleteConfig: If no environment has been selected
        NotADirectory: If check_exists is set and the directory is missing
    """
    if record.environment is None:
        raise IncompleteConfig("environment")

    path = Path(record.infra_dir) / record.environment / record.region / record.module

    if check_exists and not path.is_dir():
        raise NotADirectory(record.environment, record.region)

    return path


def var_file(record: ConfigurationRecord, basename: str, check_exists: bool = False) -> Path:
    """
    Resolve a variable file inside the module directory.

    The file itself is never checked; terraform reports a missing file.
    """
    return module_dir(record, check_exists) / (basename + VAR_FILE_EXTENSION)
