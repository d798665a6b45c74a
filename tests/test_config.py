"""Tests for runtime configuration and version reporting."""

import subprocess

import pytest
import taichi as ti

from staggerfv import __version__, config
from staggerfv.config import (
    current_backend,
    debug_enabled,
    ensure_taichi,
    get_backend,
    set_debug,
)
from staggerfv.utils import versioninfo


class TestGetBackend:
    """Tests for backend selection."""

    @pytest.mark.parametrize("name", ["cuda", "vulkan", "metal", "cpu", "CPU"])
    def test_explicit(self, monkeypatch, name):
        monkeypatch.setenv("STAGGERFV_BACKEND", name)
        assert get_backend() == name.lower()

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("STAGGERFV_BACKEND", "opengl")
        with pytest.raises(ValueError, match="Invalid STAGGERFV_BACKEND"):
            get_backend()

    def test_auto_without_nvidia_smi(self, monkeypatch):
        """Auto-detection falls back to the CPU backend."""
        monkeypatch.setenv("STAGGERFV_BACKEND", "auto")

        def missing(*args, **kwargs):
            raise FileNotFoundError("nvidia-smi")

        monkeypatch.setattr(subprocess, "run", missing)
        assert get_backend() == "cpu"

    def test_auto_with_gpu(self, monkeypatch):
        monkeypatch.delenv("STAGGERFV_BACKEND", raising=False)
        result = subprocess.CompletedProcess(
            args=["nvidia-smi", "-L"], returncode=0, stdout="GPU 0: Tesla T4\n"
        )
        monkeypatch.setattr(subprocess, "run", lambda *args, **kwargs: result)
        assert get_backend() == "cuda"


class TestRuntimeState:
    """Tests for the initialized runtime of the test session."""

    def test_backend(self):
        assert current_backend() == "cpu"
        assert ensure_taichi() == "cpu"

    def test_adopts_runtime_initialized_elsewhere(self, monkeypatch):
        """A runtime started with ti.init directly is reused, not restarted."""
        f = ti.field(ti.f64, shape=())
        f[None] = 2.5
        monkeypatch.setitem(config._runtime, "backend", None)

        def reinit(*args, **kwargs):
            raise AssertionError("ti.init called on a running runtime")

        monkeypatch.setattr(ti, "init", reinit)
        assert ensure_taichi() == "cpu"
        assert current_backend() == "cpu"
        assert f[None] == 2.5

    def test_debug_toggle(self):
        assert debug_enabled()
        set_debug(False)
        try:
            assert not debug_enabled()
        finally:
            set_debug(True)
        assert debug_enabled()


class TestVersioninfo:
    """Tests for version reporting."""

    def test_contents(self):
        info = versioninfo()
        assert info.startswith(f"staggerfv v{__version__}")
        assert "numpy" in info
        assert "taichi" in info
        assert "Taichi backend: cpu" in info
