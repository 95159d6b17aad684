import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from vector2.config import VectorSettings, configure  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "parity: cross-checks results against pygame.math.Vector2",
    )


@pytest.fixture(autouse=True)
def default_settings():
    previous = configure(VectorSettings())
    yield
    configure(previous)
