"""Schema layer for decoding raw ontology descriptions."""

from .errors import (
    DanglingReferenceError,
    MalformedError,
    ParseError,
    SchemaLoadError,
    UnknownTypeError,
)
from .models import (
    ClassAttribute,
    Header,
    Individual,
    Namespace,
    OntologyDocument,
    PropertyAttribute,
    RawClass,
    RawProperty,
)
from .loader import decode_document, load_document, load_document_from_string

__all__ = [
    "DanglingReferenceError",
    "MalformedError",
    "ParseError",
    "SchemaLoadError",
    "UnknownTypeError",
    "ClassAttribute",
    "Header",
    "Individual",
    "Namespace",
    "OntologyDocument",
    "PropertyAttribute",
    "RawClass",
    "RawProperty",
    "decode_document",
    "load_document",
    "load_document_from_string",
]
