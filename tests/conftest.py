import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import bookgrid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def short_lines():
    """Two short prose lines."""
    return ["the cat sat", "on the mat"]


@pytest.fixture
def prose_lines():
    """Sixty numbered prose lines of varying width."""
    return [f"line {i} of the tinderbox" + " and more" * (i % 4) for i in range(1, 61)]


@pytest.fixture
def word_stream(prose_lines):
    """The prose lines split into single words."""
    return " ".join(prose_lines).split()
