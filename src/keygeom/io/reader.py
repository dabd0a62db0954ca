"""Document reader for loading JSON interchange files.

This module provides the ShapeReader class for loading documents and
converting them into domain models.
"""

import json
from pathlib import Path

import structlog

from keygeom.domain.document import ShapeDocument
from keygeom.exceptions import DocumentFormatError, DocumentLoadError, KeyGeomError
from keygeom.io.converter import document_from_dict

logger = structlog.get_logger("keygeom.io")


class ShapeReader:
    """Loads interchange documents into domain models.

    Example:
        reader = ShapeReader(Path("shapes.json"))
        document = reader.load()
        for name, outline in document.outlines.items():
            print(name, outline.num_points)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON document
        """
        self._path = path
        self._document: ShapeDocument | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ShapeDocument:
        """Read and validate the document.

        Returns:
            The loaded document, with frozen keysym matrices

        Raises:
            DocumentLoadError: If the file is missing or unreadable
            DocumentFormatError: If the content is not a valid document
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DocumentLoadError(str(self._path), "file not found") from None
        except UnicodeDecodeError as e:
            raise DocumentFormatError(str(self._path), f"invalid UTF-8: {e}") from e
        except OSError as e:
            raise DocumentLoadError(str(self._path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(str(self._path), f"invalid JSON: {e}") from e

        try:
            self._document = document_from_dict(data)
        except (TypeError, ValueError, KeyGeomError) as e:
            raise DocumentFormatError(str(self._path), str(e)) from e

        logger.info(
            "Document loaded",
            path=str(self._path),
            outlines=len(self._document.outlines),
            symbols=len(self._document.symbols),
            colors=len(self._document.colors),
        )
        return self._document

    @property
    def document(self) -> ShapeDocument:
        """Return the loaded document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document
