"""Pytest fixtures for mcp-jfrog tooling tests."""

from pathlib import Path

import pytest

from mcp_jfrog_tooling.config import resolve_image_config


@pytest.fixture
def cfg() -> dict[str, str]:
    """Default image config, independent of the test process environment."""
    return resolve_image_config()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary build context with a placeholder Dockerfile."""
    (tmp_path / "Dockerfile").write_text("FROM scratch\n")
    return tmp_path


@pytest.fixture(autouse=True)
def _clear_image_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("IMAGE_REGISTRY", "IMAGE_NAME", "VERSION", "PLATFORMS", "JFROG_URL", "JFROG_ACCESS_TOKEN"):
        monkeypatch.delenv(var, raising=False)
