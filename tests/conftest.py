import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import pif_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pif_toolkit.core.context import ParseContext  # noqa: E402
from pif_toolkit.core.models.scalar import Scalar  # noqa: E402


# Common test fixtures
@pytest.fixture
def ctx() -> ParseContext:
    """Root parse context."""
    return ParseContext()


@pytest.fixture
def raw_leaf():
    """Leaf parser that returns nodes unchanged."""
    return lambda node, context: node


@pytest.fixture
def scalar_leaf():
    """The default Scalar leaf parser."""
    return Scalar.parse
