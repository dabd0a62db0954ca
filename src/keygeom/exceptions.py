"""Exception hierarchy for keygeom."""


class KeyGeomError(Exception):
    """Base exception for all keygeom errors."""

    pass


class GeometryError(KeyGeomError):
    """Errors in geometric values."""

    pass


class DegenerateGeometryError(GeometryError):
    """Geometry that cannot describe a key shape or box."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SymbolMatrixError(KeyGeomError):
    """Errors related to keysym matrices."""

    pass


class SymbolIndexError(SymbolMatrixError, IndexError):
    """Group or level outside the declared matrix dimensions."""

    def __init__(self, group: int, level: int, num_groups: int, num_levels: int) -> None:
        self.group = group
        self.level = level
        self.num_groups = num_groups
        self.num_levels = num_levels
        super().__init__(
            f"Symbol ({group}, {level}) out of range for "
            f"{num_groups}x{num_levels} matrix"
        )


class ShapeMismatchError(SymbolMatrixError, ValueError):
    """Flat data length does not match num_groups * num_levels."""

    def __init__(self, length: int, num_groups: int, num_levels: int) -> None:
        self.length = length
        self.num_groups = num_groups
        self.num_levels = num_levels
        super().__init__(
            f"Matrix data has {length} symbols, expected "
            f"{num_groups} * {num_levels} = {num_groups * num_levels}"
        )


class InvalidDimensionError(SymbolMatrixError, ValueError):
    """Matrix dimension that is not an integer."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be an integer, got {value!r}")


class InvalidKeysymError(SymbolMatrixError, ValueError):
    """Symbol code that does not fit in 32 unsigned bits."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"Invalid keysym code: {code!r}")


class FrozenMatrixError(SymbolMatrixError):
    """Attempt to modify a matrix after it was frozen for sharing."""

    def __init__(self) -> None:
        super().__init__("Keysym matrix is frozen and cannot be modified")


class CatalogError(KeyGeomError):
    """Errors related to the outline catalog."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DocumentError(KeyGeomError):
    """Errors related to interchange documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error reading a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error writing a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class DocumentFormatError(DocumentError):
    """Document content is malformed or violates a value invariant."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid document '{path}': {details}")
