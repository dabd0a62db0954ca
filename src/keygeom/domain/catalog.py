"""Named catalog of shared key outlines.

Keys do not own their outlines. A layout registers each distinct shape
once, and every key refers to it by name, receiving the same immutable
Outline instance.
"""

import threading
from collections.abc import Iterator

import structlog

from keygeom.config import CatalogConfig
from keygeom.domain.outline import Outline
from keygeom.exceptions import CatalogError
from keygeom.utils.logging import WarningHandler

logger = structlog.get_logger("keygeom.catalog")


class OutlineCatalog:
    """Maps outline names to shared Outline instances.

    Example:
        catalog = OutlineCatalog()
        catalog.add("default", Outline.rectangle(1.0, 1.0))
        outline = catalog.resolve("wide", LogWarnings())  # falls back to "default"
    """

    def __init__(self, config: CatalogConfig | None = None) -> None:
        self._config = config or CatalogConfig()
        self._outlines: dict[str, Outline] = {}
        self._fallback: Outline | None = None
        self._lock = threading.Lock()

    @property
    def default_name(self) -> str:
        return self._config.default_outline

    def add(self, name: str, outline: Outline) -> None:
        """Register an outline under name.

        Raises:
            CatalogError: If name is already registered
        """
        with self._lock:
            if name in self._outlines:
                raise CatalogError(f"Outline named {name} is already defined")
            self._outlines[name] = outline
        logger.debug("Outline registered", name=name, points=outline.num_points)

    def get(self, name: str) -> Outline:
        """Return the outline registered under name.

        Raises:
            CatalogError: If no such outline exists
        """
        try:
            return self._outlines[name]
        except KeyError:
            raise CatalogError(f"Outline named {name} does not exist") from None

    def resolve(self, name: str | None, warnings: WarningHandler) -> Outline:
        """Find the outline a key should use.

        A missing name selects the default outline. An unknown name is
        reported to warnings and also falls back to the default. If the
        catalog has no default outline, a square of the configured
        fallback size is used.

        Args:
            name: Outline name requested by the key, if any
            warnings: Receives a message for every fallback taken

        Returns:
            Shared Outline instance
        """
        if name is not None and name != self.default_name:
            if name in self._outlines:
                return self._outlines[name]
            warnings.handle(
                f"Outline named {name} does not exist! Using {self.default_name}"
            )

        if self.default_name in self._outlines:
            return self._outlines[self.default_name]

        size = self._config.fallback_size
        warnings.handle(f"No {self.default_name} outline defined! Using {size}x{size}")
        with self._lock:
            if self._fallback is None:
                self._fallback = Outline.rectangle(size, size)
            return self._fallback

    def names(self) -> list[str]:
        return list(self._outlines)

    def items(self) -> Iterator[tuple[str, Outline]]:
        return iter(list(self._outlines.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._outlines

    def __len__(self) -> int:
        return len(self._outlines)
