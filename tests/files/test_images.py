"""
Unit tests for guap_utils.files.images
"""
import base64
import io

import numpy as np
import pytest
from PIL import Image

from guap_utils.config import CompressionConfig
from guap_utils.files import ImageCompressionError, compress_img, scaled_size, to_blob


def _open(data_url):
    return Image.open(io.BytesIO(to_blob(data_url).data))


@pytest.fixture
def noisy_png_data_url():
    """300x300 random-noise PNG, so JPEG size tracks quality."""
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(300, 300, 3), dtype=np.uint8)
    buffer = io.BytesIO()
    Image.fromarray(pixels).save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


class TestScaledSize:

    @pytest.mark.parametrize(
        "width, height, limit, expected",
        [
            (4000, 3000, 1000, (1000, 750)),
            (3000, 4000, 1000, (750, 1000)),
            (1000, 1000, 1000, (1000, 1000)),
            (2000, 2000, 500, (500, 500)),
            (300, 600, 1000, (300, 600)),
            (5000, 3, 1000, (1000, 1)),
        ],
    )
    def test_scaled_size(self, width, height, limit, expected):
        assert scaled_size(width, height, limit) == expected


class TestCompressImg:

    def test_when_wide_image_then_width_capped(self, wide_png_data_url):
        result = compress_img(wide_png_data_url)

        assert result.startswith("data:image/jpeg;base64,")
        with _open(result) as img:
            assert img.format == "JPEG"
            assert img.size == (1000, 250)

    def test_when_tall_rgba_then_height_capped_and_rgb(self, tall_rgba_data_url):
        result = compress_img(tall_rgba_data_url)

        with _open(result) as img:
            assert img.size == (250, 1000)
            assert img.mode == "RGB"

    def test_when_small_image_then_size_kept(self, sample_image):
        payload = base64.b64encode(sample_image.read_bytes()).decode("ascii")

        result = compress_img(payload)

        with _open(result) as img:
            assert img.size == (200, 100)

    def test_when_custom_max_width_then_used(self, wide_png_data_url):
        with _open(compress_img(wide_png_data_url, max_width=400)) as img:
            assert img.size == (400, 100)

    def test_when_config_given_then_defaults_replaced(self, wide_png_data_url):
        config = CompressionConfig(max_width=200)

        with _open(compress_img(wide_png_data_url, config=config)) as img:
            assert img.size == (200, 50)

    def test_when_lower_quality_then_smaller_output(self, noisy_png_data_url):
        low = compress_img(noisy_png_data_url, quality=0.1)
        high = compress_img(noisy_png_data_url, quality=0.95)

        assert len(low) < len(high)

    @pytest.mark.parametrize("value", [None, "", 42])
    def test_when_empty_then_raises(self, value):
        with pytest.raises(ImageCompressionError):
            compress_img(value)

    def test_when_not_an_image_then_raises(self):
        payload = "data:image/png;base64," + base64.b64encode(b"not an image").decode("ascii")

        with pytest.raises(ImageCompressionError, match="Failed to load image"):
            compress_img(payload)

    def test_when_bad_base64_then_raises(self):
        with pytest.raises(ImageCompressionError):
            compress_img("@@@")


class TestCompressionConfig:

    def test_quality_for_small_and_large_payloads(self):
        config = CompressionConfig()

        assert config.quality_for(0.5) == 0.9
        assert config.quality_for(1.0) == 0.9
        assert config.quality_for(1.5) == 0.8
