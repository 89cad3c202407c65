"""
tfselect - remembers terraform module selections per git repository.

Builds -backend-config / -var-file paths from the stored environment,
region and module and runs terraform with them.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
