"""Shared pytest fixtures for image generator tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from imagegen.core.config import ImageGenConfig

FIXED_SEED = 1_700_000_000_000


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> ImageGenConfig:
    """Create a configuration that ignores the environment and any .env file.

    Returns:
        ImageGenConfig instance with default values
    """
    return ImageGenConfig(_env_file=None)


@pytest.fixture
def test_templates_dir(temp_dir: Path) -> Path:
    """Create a minimal templates directory for the API tests.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        Path to a directory containing a small ``index.html``
    """
    templates_dir = temp_dir / "templates"
    templates_dir.mkdir()
    (templates_dir / "index.html").write_text(
        "<!DOCTYPE html><html><head><title>AI Image Generator</title></head>"
        "<body><h1>AI Image Generator</h1></body></html>",
        encoding="utf-8",
    )
    return templates_dir


@pytest.fixture
def test_client(
    monkeypatch: pytest.MonkeyPatch,
    test_config: ImageGenConfig,
    test_templates_dir: Path,
) -> Generator[TestClient, None, None]:
    """FastAPI test client wired to the test configuration and template.

    Yields:
        TestClient with the application lifespan running
    """
    from imagegen.api import main

    monkeypatch.setattr(main, "config", test_config)
    monkeypatch.setattr(main, "TEMPLATES_DIR", test_templates_dir)

    with TestClient(main.app) as client:
        yield client


@pytest.fixture
def fixed_seed(monkeypatch: pytest.MonkeyPatch) -> int:
    """Freeze the cache-busting seed used by ``build_image_url``.

    Returns:
        The frozen seed value
    """
    from imagegen.core import image_url

    monkeypatch.setattr(image_url, "current_seed", lambda: FIXED_SEED)
    return FIXED_SEED


@pytest.fixture
def sample_prompts() -> list[str]:
    """Sample prompts for testing.

    Returns:
        List of test prompts
    """
    return [
        "a red fox in snow",
        "Short",
        "a lighthouse at dusk, oil painting, 8K",
        "café on the Seine / morning?",
        "A very long prompt " * 20,
    ]
