"""
FamilyAggregator - Group textures by family and order them deterministically.
"""

from typing import Dict, List, Tuple

from .encoder import Texture


class FamilyAggregator:
    """
    Collects textures per family as entries are processed.

    Entry order from a directory walk or an archive listing is arbitrary,
    so sorted_families() sorts both family keys and textures.
    """

    def __init__(self):
        self._families: Dict[str, List[Texture]] = {}

    def add(self, family: str, texture: Texture) -> None:
        """Add a texture to its family."""
        self._families.setdefault(family, []).append(texture)

    def sorted_families(self) -> List[Tuple[str, List[Texture]]]:
        """
        Return (family, textures) pairs sorted by family, then caption.

        Textures with equal captions are ordered by their HTML, so the
        result never depends on insertion order.
        """
        return [
            (family, sorted(self._families[family], key=lambda t: (t.caption, t.html)))
            for family in sorted(self._families)
        ]

    @property
    def family_counts(self) -> Dict[str, int]:
        """Number of textures per family."""
        return {name: len(textures) for name, textures in self._families.items()}

    def __len__(self) -> int:
        return len(self._families)
