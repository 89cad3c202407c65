"""
Git repository lookup.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .errors import GitRepositoryError

logger = logging.getLogger(__name__)


def get_repo_root(cwd: Optional[Path] = None, timeout: int = 15) -> Path:
    """
    Return the top-level directory of the enclosing git repository.

    Raises:
        GitRepositoryError: If git is missing or cwd is not inside a repository
    """
    cmd = ["git", "rev-parse", "--show-toplevel"]

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            shell=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise GitRepositoryError(f"Could not determine git repo: {e}") from e

    root = result.stdout.rstrip("\n")
    if result.returncode != 0 or not root:
        raise GitRepositoryError(
            f"Could not determine git repo: {result.stderr.strip() or 'not a git repository'}"
        )

    logger.debug(f"Repository root: {root}")
    return Path(root)
