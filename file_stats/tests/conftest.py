import sys
from pathlib import Path

import pytest

# Ensure the file_stats package is importable when running tests
_PROJECT_DIR = Path(__file__).resolve().parents[2]
if str(_PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(_PROJECT_DIR))


def _write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(b"x" * size)
    return path


@pytest.fixture
def make_file():
    """make_file(path, size) writes `size` bytes, creating parent folders."""
    return _write_file


@pytest.fixture
def sample_tree(tmp_path, make_file):
    """Three .txt files (10/20/30 bytes) and one 5000-byte .bin."""
    root = tmp_path / "root"
    make_file(root / "a.txt", 10)
    make_file(root / "sub" / "b.txt", 20)
    make_file(root / "sub" / "deep" / "c.txt", 30)
    make_file(root / "data.bin", 5000)
    return root
