import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture()
def sample_bytes():
    """256 bytes counting up from 0; every offset holds its own value."""
    return bytes(range(256))


@pytest.fixture()
def dict_file(tmp_path: Path, sample_bytes):
    p = tmp_path / "sample.lsd"
    p.write_bytes(sample_bytes)
    return p
