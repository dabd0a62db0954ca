"""Document writer for saving JSON interchange files."""

import json
from pathlib import Path

import structlog

from keygeom.domain.document import ShapeDocument
from keygeom.exceptions import DocumentSaveError
from keygeom.io.converter import document_to_dict

logger = structlog.get_logger("keygeom.io")


class ShapeWriter:
    """Writes interchange documents as indented JSON.

    Example:
        writer = ShapeWriter(Path("shapes-rotated.json"))
        writer.save(document)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    def save(self, document: ShapeDocument) -> None:
        """Write the document to the output path.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        text = json.dumps(document_to_dict(document), indent=2)
        try:
            self._output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e

        logger.info("Document saved", path=str(self._output_path))

    @staticmethod
    def get_rotated_path(input_path: Path) -> Path:
        """Generate output path for a rotated copy.

        Converts: shapes.json -> shapes-rotated.json
        """
        return input_path.parent / f"{input_path.stem}-rotated{input_path.suffix}"
