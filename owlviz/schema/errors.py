"""Schema-related exceptions."""


class SchemaLoadError(Exception):
    """Raised when an ontology file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ParseError(Exception):
    """Base class for every failure to turn a raw description into a graph."""


class MalformedError(ParseError):
    """Raised when the raw description is structurally invalid."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.detail = message
        self.errors = errors or []
        super().__init__(message)


class DanglingReferenceError(ParseError):
    """Raised when a property or operand references an unknown node id."""

    def __init__(self, ref_id: str, owner: str | None = None):
        self.ref_id = ref_id
        self.owner = owner
        message = f"Unknown node reference '{ref_id}'"
        if owner:
            message += f" in '{owner}'"
        super().__init__(message)


class UnknownTypeError(ParseError):
    """Raised when a class or property carries an unrecognized type tag."""

    def __init__(self, raw_type: str, owner: str | None = None):
        self.raw_type = raw_type
        self.owner = owner
        message = f"Unknown type '{raw_type}'"
        if owner:
            message += f" for '{owner}'"
        super().__init__(message)
