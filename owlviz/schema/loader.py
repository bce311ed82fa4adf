"""JSON/YAML loading and decoding of raw ontology descriptions."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import MalformedError, SchemaLoadError
from .models import OntologyDocument


def load_document(path: str | Path) -> dict:
    """Load an ontology description file and return the raw data.

    Files ending in ``.json`` are read as JSON, everything else as YAML.

    Args:
        path: Path to the description file.

    Returns:
        The raw description as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _load_text(text, as_json=path.suffix.lower() == ".json", path=str(path))


def load_document_from_string(text: str, as_json: bool = False) -> dict:
    """Load a raw description from a JSON or YAML string.

    Raises:
        SchemaLoadError: If the text cannot be parsed.
    """
    return _load_text(text, as_json=as_json)


def _load_text(text: str, as_json: bool, path: str | None = None) -> dict:
    try:
        data = json.loads(text) if as_json else yaml.safe_load(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON: {e}", path) from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected a mapping at root, got {type(data).__name__}", path
        )

    return data


def decode_document(data: object) -> OntologyDocument:
    """Decode raw data into an OntologyDocument.

    Args:
        data: The raw description, normally a dictionary.

    Returns:
        The decoded document.

    Raises:
        MalformedError: If the data is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise MalformedError(
            f"Expected a mapping at root, got {type(data).__name__}"
        )

    try:
        return OntologyDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise MalformedError(
            f"Ontology description is malformed ({len(errors)} error(s))", errors
        ) from e
