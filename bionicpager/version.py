from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional


def _installed_version() -> Optional[str]:
    try:
        return importlib.metadata.version("bionicpager")
    except importlib.metadata.PackageNotFoundError:
        return None


def _git_commit() -> Optional[str]:
    # Only meaningful when running from a checkout
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=str(here), stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def get_version_string() -> str:
    version = _installed_version() or "unknown"
    commit = _git_commit()
    return f"bionicpager {version} ({commit})" if commit else f"bionicpager {version}"
