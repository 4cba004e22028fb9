import pytest
from PIL import Image

from config import DeckConfig


@pytest.fixture
def deck_config(tmp_path):
    return DeckConfig(
        client_secret_path=str(tmp_path / "client_secret.json"),
        credentials_path=str(tmp_path / "credentials" / "token.json"),
        image_path=str(tmp_path / "product.png"),
        output_pdf_path=str(tmp_path / "pdf" / "result.pdf"),
        copy_name="Launch deck",
    )


@pytest.fixture
def png_image(tmp_path):
    def _make(name="product.png", image_format="PNG"):
        path = tmp_path / name
        Image.new("RGB", (4, 4), (255, 0, 0)).save(path, image_format)
        return path

    return _make
