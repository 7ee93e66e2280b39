"""
Pytest fixtures for crf2html tests.
"""

import io
import zipfile

import pytest


def make_image_bytes(fmt='PNG', size=(100, 100), mode='RGB', color='red', **save_args):
    """Create an encoded test image."""
    from PIL import Image

    img = Image.new(mode, size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt, **save_args)
    return buffer.getvalue()


def make_pcx_bytes(size=(64, 32), color=(0, 128, 0)):
    """Create a palette-indexed PCX image."""
    from PIL import Image

    img = Image.new('P', size, color=1)
    img.putpalette([0, 0, 0] + list(color) + [0] * (254 * 3))
    buffer = io.BytesIO()
    img.save(buffer, format='PCX')
    return buffer.getvalue()


def make_tga_bytes(size=(40, 80), color=(0, 0, 255)):
    """Create a run-length encoded TGA image."""
    return make_image_bytes('TGA', size=size, color=color, compression='tga_rle')


@pytest.fixture
def image_bytes():
    """Fixture providing the image factory."""
    return make_image_bytes


@pytest.fixture
def sample_png_bytes():
    """Fixture providing sample PNG bytes with transparency."""
    return make_image_bytes('PNG', size=(100, 50), mode='RGBA', color=(255, 0, 0, 0))


@pytest.fixture
def sample_pcx_bytes():
    """Fixture providing sample PCX bytes."""
    return make_pcx_bytes()


@pytest.fixture
def sample_tga_bytes():
    """Fixture providing sample TGA bytes."""
    return make_tga_bytes()


@pytest.fixture
def texture_files():
    """Fixture providing a small texture set keyed by relative path."""
    return {
        'wood/pine.png': make_image_bytes('PNG', size=(64, 64), color='green'),
        'wood/oak.png': make_image_bytes('PNG', size=(200, 100), color='brown'),
        'stone/brick.jpg': make_image_bytes('JPEG', size=(50, 100), color='gray'),
        'stone/slate.pcx': make_pcx_bytes(),
        'stone/full.pcx': make_pcx_bytes(),
        'stone/readme.txt': b'not a texture',
    }


@pytest.fixture
def texture_dir(tmp_path, texture_files):
    """Fixture providing the texture set as a directory tree."""
    root = tmp_path / 'textures'
    for rel_path, data in texture_files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return str(root)


def write_archive(path, files, order=None):
    """Write files to a ZIP archive, optionally in a given member order."""
    names = order or list(files)
    with zipfile.ZipFile(path, 'w') as archive:
        for name in names:
            archive.writestr(name, files[name])
    return str(path)


@pytest.fixture
def texture_archive(tmp_path, texture_files):
    """Fixture providing the texture set as a .crf archive."""
    return write_archive(tmp_path / 'fam.crf', texture_files)


@pytest.fixture
def settings(tmp_path, texture_dir):
    """Fixture providing settings for the texture directory."""
    from crf2html.settings import ProgramSettings

    return ProgramSettings(
        source_path=texture_dir,
        output_path=str(tmp_path / 'out' / 'textures.html'),
    )


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')


@pytest.fixture
def archive_writer():
    """Fixture providing the archive writer."""
    return write_archive
