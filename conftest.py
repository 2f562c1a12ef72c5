import os
import sys

import pytest

# Add the ``src`` directory to Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()


@pytest.fixture
def options_file(tmp_path):
    """Return a path for an options file inside ``tmp_path``."""
    return tmp_path / "options.json"
