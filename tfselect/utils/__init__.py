"""
Utility functions for tfselect.
"""

from .logger import setup_logging
from .validators import validate_terraform_installed

__all__ = ["setup_logging", "validate_terraform_installed"]
