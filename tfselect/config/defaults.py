"""
Default settings for tfselect.

These are the default values used when no user settings file exists.
"""

DEFAULT_SETTINGS = {
    # Terraform binary
    "terraform_binary": "terraform",

    # Logging
    "log_level": "WARNING",
    "log_file": False,

    # Fail with NotADirectory when the module directory is missing
    # instead of letting terraform report the bad path.
    "check_module_dir": False,

    # Directories under the infra root that are never offered as environments
    "reserved_environment_dirs": ["terraform"],
}
