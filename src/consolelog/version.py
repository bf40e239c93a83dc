"""Version information for consolelog."""

import os
from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Get the installed distribution version.

    Returns:
        Version string, or 'unknown' when the package is not installed.
    """
    try:
        return version("consolelog")
    except PackageNotFoundError:
        return "unknown"


def get_git_commit() -> str:
    """Get the git commit hash from environment variable.

    Returns:
        Git commit hash (short or full), or 'unknown' if not set.
    """
    return os.getenv("GIT_COMMIT", "unknown")


def get_version_info() -> str:
    """Get formatted version information.

    Returns:
        Formatted string with package version and git commit.
    """
    return f"consolelog {get_package_version()} (commit={get_git_commit()})"
