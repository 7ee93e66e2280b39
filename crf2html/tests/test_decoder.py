"""Tests for the decoder."""

import pytest
from PIL import Image

from crf2html.classifier import classify
from crf2html.decoder import DecodedImage, decode
from crf2html.errors import DecodeError
from crf2html.settings import ProgramSettings


@pytest.fixture
def settings():
    return ProgramSettings(source_path='src', output_path='out.html')


class TestDecode:
    """Tests for decode."""

    def test_pcx(self, settings, sample_pcx_bytes):
        """Test palette-indexed PCX decoding."""
        decoded = decode(classify('stone/slate.pcx', settings), sample_pcx_bytes)

        assert decoded.size == (64, 32)
        assert decoded.mode == 'P'
        assert decoded.supports_alpha is False
        assert decoded.getpixel(0, 0) == (0, 128, 0, 255)

    def test_tga(self, settings, sample_tga_bytes):
        """Test run-length TGA decoding."""
        decoded = decode(classify('metal/plate.tga', settings), sample_tga_bytes)

        assert decoded.width == 40
        assert decoded.height == 80
        assert decoded.getpixel(5, 5) == (0, 0, 255, 255)

    def test_png_with_alpha(self, settings, sample_png_bytes):
        decoded = decode(classify('glass/pane.png', settings), sample_png_bytes)

        assert decoded.supports_alpha is True
        assert decoded.getpixel(0, 0)[3] == 0

    def test_gif_with_transparency(self, settings, image_bytes):
        """Test GIF transparency is reported as alpha support."""
        data = image_bytes('GIF', size=(10, 10), mode='P', color=0, transparency=0)

        decoded = decode(classify('glass/window.gif', settings), data)

        assert decoded.supports_alpha is True

    def test_jpeg_sniffed_from_header(self, settings, image_bytes):
        """Test generic formats are identified from content, not extension."""
        data = image_bytes('PNG', size=(8, 8))

        decoded = decode(classify('wood/mislabelled.jpg', settings), data)

        assert decoded.image.format == 'PNG'
        assert decoded.supports_alpha is False

    def test_invalid_bytes(self, settings):
        """Test malformed data raises DecodeError with the entry path."""
        with pytest.raises(DecodeError) as exc_info:
            decode(classify('wood/oak.png', settings), b'not an image')

        assert exc_info.value.path == 'wood/oak.png'
        assert exc_info.value.cause is not None

    def test_truncated_pcx(self, settings, sample_pcx_bytes):
        with pytest.raises(DecodeError):
            decode(classify('stone/slate.pcx', settings), sample_pcx_bytes[:40])


class TestDecodedImage:
    """Tests for DecodedImage."""

    def test_rgb_has_no_alpha(self):
        decoded = DecodedImage(Image.new('RGB', (3, 2), color=(1, 2, 3)))

        assert decoded.supports_alpha is False
        assert decoded.getpixel(2, 1) == (1, 2, 3, 255)

    def test_la_has_alpha(self):
        assert DecodedImage(Image.new('LA', (3, 2))).supports_alpha is True
