"""
Taichi runtime configuration and debug mode.

Environment variables:
    STAGGERFV_BACKEND: 'cuda', 'vulkan', 'metal', 'cpu', or 'auto' (default)
    STAGGERFV_DEBUG: '1' to enable debug mode

Accelerator (GPU architecture) fields live in memory owned by the Taichi
runtime. Without an accelerator the runtime falls back to its CPU backend,
which keeps the device code path testable on any machine.

Debug mode turns on Taichi's bounds checks inside kernels and the halo
freshness guard of the operators (StaleHaloError on fields whose halos were
not refilled since the last update).
"""

import logging
import os
import subprocess

import taichi as ti
from taichi.lang import impl
from taichi.lang.exception import TaichiRuntimeError

from staggerfv.core.dtypes import DTYPE

logger = logging.getLogger(__name__)

BACKENDS = ("cuda", "vulkan", "metal", "cpu")

_runtime = {"backend": None, "debug": False}


def get_backend() -> str:
    """Determine Taichi backend: check env var, then auto-detect."""
    env = os.environ.get("STAGGERFV_BACKEND", "auto").lower()

    if env in BACKENDS:
        return env
    if env != "auto":
        raise ValueError(f"Invalid STAGGERFV_BACKEND: {env}")

    # Auto-detect CUDA
    try:
        result = subprocess.run(
            ["nvidia-smi", "-L"], capture_output=True, text=True, timeout=5
        )
        if result.returncode == 0 and "GPU" in result.stdout:
            return "cuda"
    except (FileNotFoundError, subprocess.TimeoutExpired):
        pass

    logger.info("No CUDA device found, using the Taichi CPU backend")
    return "cpu"


def init_taichi(
    backend: str | None = None,
    debug: bool | None = None,
    default_fp=DTYPE,
    kernel_profiler: bool = False,
) -> str:
    """Initialize Taichi with specified or auto-detected backend.

    Args:
        backend: One of BACKENDS, or None to use get_backend()
        debug: Enable debug mode; None reads STAGGERFV_DEBUG
        default_fp: Default Taichi float type
        kernel_profiler: Enable Taichi's kernel profiler

    Returns:
        The backend name in use
    """
    if backend is None:
        backend = get_backend()
    if debug is None:
        debug = os.environ.get("STAGGERFV_DEBUG", "0") == "1"

    arch = {
        "cuda": ti.cuda,
        "vulkan": ti.vulkan,
        "metal": ti.metal,
        "cpu": ti.cpu,
    }.get(backend)
    if arch is None:
        raise ValueError(f"Unknown backend: {backend}")

    ti.init(
        arch=arch,
        default_fp=default_fp,
        debug=debug,
        offline_cache=True,
        kernel_profiler=kernel_profiler,
    )
    _runtime["backend"] = backend
    _runtime["debug"] = debug
    logger.info("Initialized Taichi (backend=%s, debug=%s)", backend, debug)
    return backend


def _running_backend() -> str | None:
    """Backend of a Taichi runtime initialized by the caller, if any."""
    try:
        prog = impl.get_runtime().prog
    except TaichiRuntimeError:
        prog = None
    if prog is None:
        return None
    arch = impl.current_cfg().arch
    for name in ("cuda", "vulkan", "metal"):
        if arch == getattr(ti, name):
            return name
    return "cpu"


def ensure_taichi() -> str:
    """Initialize Taichi with defaults unless already initialized.

    Called before the first accelerator allocation. A runtime the caller set
    up with ``ti.init`` directly is adopted as is, since initializing again
    would discard the fields it already holds.
    """
    if _runtime["backend"] is None:
        backend = _running_backend()
        if backend is None:
            return init_taichi()
        _runtime["backend"] = backend
        logger.info("Using the Taichi runtime initialized by the caller (backend=%s)", backend)
    return _runtime["backend"]


def current_backend() -> str | None:
    """Backend of the initialized runtime, or None before initialization."""
    return _runtime["backend"]


def debug_enabled() -> bool:
    """Whether the halo freshness guard is active."""
    return _runtime["debug"]


def set_debug(enabled: bool) -> None:
    """Toggle the halo freshness guard without reinitializing Taichi."""
    _runtime["debug"] = bool(enabled)
