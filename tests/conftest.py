import pytest
from PIL import Image

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@pytest.fixture
def checker_path(tmp_path):
    """2x2 PNG: black, white on the first row, black, white on the second."""
    img = Image.new("RGB", (2, 2))
    pixels = img.load()
    pixels[0, 0] = BLACK
    pixels[1, 0] = WHITE
    pixels[0, 1] = BLACK
    pixels[1, 1] = WHITE
    path = tmp_path / "checker.png"
    img.save(path)
    return path


@pytest.fixture
def solid_path(tmp_path):
    path = tmp_path / "solid.png"
    Image.new("RGB", (7, 5), (200, 40, 90)).save(path)
    return path
