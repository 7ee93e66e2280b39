"""
Page - Render grouped textures into a single HTML document and write it.
"""

import html
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Tuple

from .encoder import Texture
from .errors import WriteError
from .settings import ProgramSettings

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body,h1,h2{{color:#fff;font-family:Arial,sans-serif;line-height:1}}
body{{background:#333}}
h1{{font-size:18px;text-transform:uppercase}}
h2{{border-bottom:1px solid #899;font-size:16px;padding:0 0 8px;text-transform:capitalize}}
section{{padding:24px 0}}
.family{{display:flex;flex-wrap:wrap;gap:16px}}
.texture,.image{{width:{size}px}}
.texture{{flex:0 0 auto}}
.image{{height:{size}px}}
img{{width:100%;height:100%;object-fit:contain}}
.caption{{color:#899;font-size:12px;text-align:center;padding:16px 0;display:flex;flex-direction:column;gap:8px}}
.filename{{font-size:14px;font-weight:bold}}
</style>
</head>
<body>
<h1>{title}</h1>
{sections}
</body>
</html>
"""

SECTION_TEMPLATE = "<section><h2>{family}</h2><div class='family'>{textures}</div></section>"


def render_section(family: str, textures: Sequence[Texture]) -> str:
    """Render one family section; textures are used in the order given."""
    return SECTION_TEMPLATE.format(
        family=html.escape(family),
        textures=''.join(texture.html for texture in textures),
    )


def render_page(
    families: List[Tuple[str, List[Texture]]],
    settings: ProgramSettings
) -> str:
    """
    Render the full gallery document.

    Args:
        families: (family, textures) pairs, already sorted
        settings: Supplies the title and thumbnail size
    """
    sections = ''.join(render_section(family, textures) for family, textures in families)
    return PAGE_TEMPLATE.format(
        title=html.escape(settings.title),
        size=settings.thumbnail_size,
        sections=sections,
    )


def write_page(filepath: str, document: str) -> int:
    """
    Write the document as UTF-8, replacing any existing file.

    The data goes to a temporary file beside the target, which is then
    renamed over it, so the target is either the old page or the full
    new one.

    Returns:
        Number of bytes written

    Raises:
        WriteError: If the file cannot be written
    """
    path = Path(filepath)
    data = document.encode('utf-8')
    temp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            'wb', dir=path.parent, prefix=f".{path.name}.", suffix='.tmp', delete=False
        ) as f:
            temp_name = f.name
            f.write(data)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, path)
    except OSError as e:
        if temp_name and os.path.exists(temp_name):
            os.remove(temp_name)
        raise WriteError(filepath, e) from e
    return len(data)
