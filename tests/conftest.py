import base64
import io
import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import guap_utils
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def _png_data_url(img: Image.Image) -> str:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


# Common test fixtures
@pytest.fixture
def flat_records():
    """The four-record hierarchy used across tree tests."""
    return [
        {"id": 1, "parentId": 0, "name": "A"},
        {"id": 2, "parentId": 1, "name": "B"},
        {"id": 3, "parentId": 1, "name": "C"},
        {"id": 4, "parentId": 2, "name": "D"},
    ]


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image on disk."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def wide_png_data_url():
    """2000x500 PNG as a data URL."""
    return _png_data_url(Image.new("RGB", (2000, 500), color=(200, 30, 30)))


@pytest.fixture
def tall_rgba_data_url():
    """400x1600 transparent PNG as a data URL."""
    return _png_data_url(Image.new("RGBA", (400, 1600), color=(0, 0, 255, 128)))
