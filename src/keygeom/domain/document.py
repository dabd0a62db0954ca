"""Interchange document grouping the values of one keyboard."""

from dataclasses import dataclass, field

from keygeom.config import CatalogConfig
from keygeom.domain.bounds import Bounds
from keygeom.domain.catalog import OutlineCatalog
from keygeom.domain.color import Color
from keygeom.domain.keysym_matrix import KeysymMatrix
from keygeom.domain.outline import Outline


@dataclass
class ShapeDocument:
    """All geometry and symbol values exchanged for one keyboard.

    Attributes:
        bounds: Bounds of the whole keyboard
        outlines: Key shapes by outline name
        symbols: Keysym matrices by key name
        colors: Named drawing colors
    """

    bounds: Bounds
    outlines: dict[str, Outline] = field(default_factory=dict)
    symbols: dict[str, KeysymMatrix] = field(default_factory=dict)
    colors: dict[str, Color] = field(default_factory=dict)

    def catalog(self, config: CatalogConfig | None = None) -> OutlineCatalog:
        """Build an OutlineCatalog sharing this document's outlines."""
        catalog = OutlineCatalog(config)
        for name, outline in self.outlines.items():
            catalog.add(name, outline)
        return catalog
