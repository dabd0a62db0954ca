"""Document I/O layer for keygeom.

This module reads and writes JSON interchange documents holding the
geometry and symbol values of one keyboard.

Key responsibilities:
- Load and validate documents, rejecting unknown fields
- Round-trip every field, including vertex order and matrix shape
- Report problems as DocumentError subclasses

Key classes:
- ShapeReader: Load documents
- ShapeWriter: Save documents
"""

from keygeom.io.converter import document_from_dict, document_to_dict
from keygeom.io.reader import ShapeReader
from keygeom.io.writer import ShapeWriter

__all__ = [
    "ShapeReader",
    "ShapeWriter",
    "document_from_dict",
    "document_to_dict",
]
