"""
Validation utilities for tfselect.
"""

import shutil


def validate_terraform_installed(terraform_binary: str = "terraform") -> bool:
    """
    Check if Terraform is installed and accessible.

    Args:
        terraform_binary: Path or name of terraform binary

    Returns:
        True if the binary resolves on PATH (or is an executable path)
    """
    return shutil.which(terraform_binary) is not None
