"""Git hash capture so a printed run summary can be traced to its code version."""

import subprocess


def _git(*args: str) -> str:
    return subprocess.check_output(
        ["git", *args],
        stderr=subprocess.DEVNULL,
    ).decode().strip()


def _is_dirty() -> bool:
    """True when there are staged or unstaged changes."""
    for extra in ((), ("--cached",)):
        try:
            _git("diff", "--quiet", *extra)
        except subprocess.CalledProcessError:
            return True
    return False


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed with '-dirty' for uncommitted changes.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" outside a git checkout
        or when git is not installed.
    """
    try:
        sha = _git("rev-parse", "--short", "HEAD")
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"
    return f"{sha}-dirty" if _is_dirty() else sha
