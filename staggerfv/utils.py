"""Version reporting for bug reports and run metadata."""

import platform
from importlib.metadata import PackageNotFoundError, version

import numpy as np

from staggerfv import __version__
from staggerfv.config import current_backend


def _taichi_version() -> str:
    try:
        return version("taichi")
    except PackageNotFoundError:
        return "unknown"


def versioninfo() -> str:
    """Describe the package, its stack and the active Taichi backend."""
    backend = current_backend()
    lines = [
        f"staggerfv v{__version__}",
        f"  Python: {platform.python_version()} ({platform.system()})",
        f"  numpy: {np.__version__}",
        f"  taichi: {_taichi_version()}",
        f"  Taichi backend: {backend if backend is not None else 'not initialized'}",
    ]
    return "\n".join(lines) + "\n"
