"""Pydantic models for raw ontology descriptions."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LanguageMap = dict[str, str]

# Key used for labels and comments given as plain strings.
UNDEFINED_LANGUAGE = "undefined"


def _normalize_language_map(value):
    """Normalize a plain string into a single-entry language map."""
    if value is None:
        return {}
    if isinstance(value, str):
        return {UNDEFINED_LANGUAGE: value} if value else {}
    if isinstance(value, dict):
        return {str(k): v for k, v in value.items() if v is not None}
    return value


def _normalize_reference(value):
    """Normalize a domain/range reference to a single id."""
    if isinstance(value, list):
        if not value:
            return None
        if len(value) > 1:
            raise ValueError(f"expected a single id reference, got {len(value)}")
        return value[0]
    return value


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Individual(_Record):
    """A named individual attached to a class."""

    iri: str
    labels: LanguageMap = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_individual(cls, data):
        """Allow individuals given as bare IRIs."""
        if isinstance(data, str):
            return {"iri": data}
        return data

    @field_validator("labels", mode="before")
    @classmethod
    def normalize_labels(cls, value):
        return _normalize_language_map(value)


class ClassFields(_Record):
    """Fields shared by class records and class attribute records."""

    id: str = Field(min_length=1)
    iri: str | None = None
    label: LanguageMap = Field(default_factory=dict)
    comment: LanguageMap = Field(default_factory=dict)
    individuals: list[Individual] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)
    equivalent: list[str] = Field(default_factory=list)
    union: list[str] = Field(default_factory=list)
    intersection: list[str] = Field(default_factory=list)
    complement: list[str] = Field(default_factory=list)
    disjoint_union: list[str] = Field(default_factory=list, alias="disjointUnion")
    x: float | None = None
    y: float | None = None
    pinned: bool | None = None

    @field_validator("label", "comment", mode="before")
    @classmethod
    def normalize_text(cls, value):
        return _normalize_language_map(value)

    @field_validator(
        "attributes",
        "equivalent",
        "union",
        "intersection",
        "complement",
        "disjoint_union",
        mode="before",
    )
    @classmethod
    def normalize_id_list(cls, value):
        """Accept a single id where a list is expected."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class RawClass(ClassFields):
    """A class or datatype entry from the `class` array."""

    type: str = Field(min_length=1)


class ClassAttribute(ClassFields):
    """An entry from `classAttribute`, merged into its class by id."""


class PropertyFields(_Record):
    """Fields shared by property records and property attribute records."""

    id: str = Field(min_length=1)
    iri: str | None = None
    label: LanguageMap = Field(default_factory=dict)
    comment: LanguageMap = Field(default_factory=dict)
    domain: str | None = None
    range: str | None = None
    inverse: str | None = None
    attributes: list[str] = Field(default_factory=list)
    equivalent: list[str] = Field(default_factory=list)
    min_cardinality: int | None = Field(default=None, alias="minCardinality", ge=0)
    max_cardinality: int | None = Field(default=None, alias="maxCardinality", ge=0)
    cardinality: int | None = Field(default=None, ge=0)

    @field_validator("label", "comment", mode="before")
    @classmethod
    def normalize_text(cls, value):
        return _normalize_language_map(value)

    @field_validator("domain", "range", mode="before")
    @classmethod
    def normalize_reference(cls, value):
        return _normalize_reference(value)

    @field_validator("attributes", "equivalent", mode="before")
    @classmethod
    def normalize_id_list(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class RawProperty(PropertyFields):
    """An entry from the `property` array."""

    type: str = Field(min_length=1)


class PropertyAttribute(PropertyFields):
    """An entry from `propertyAttribute`, merged into its property by id."""


class Namespace(_Record):
    """A namespace prefix binding."""

    prefix: str = ""
    iri: str


class Header(_Record):
    """Ontology header metadata."""

    iri: str = ""
    title: LanguageMap = Field(default_factory=dict)
    version: str | None = None
    description: LanguageMap = Field(default_factory=dict)
    author: list[str] = Field(default_factory=list)

    @field_validator("title", "description", mode="before")
    @classmethod
    def normalize_text(cls, value):
        return _normalize_language_map(value)

    @field_validator("author", mode="before")
    @classmethod
    def normalize_author(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("version", mode="before")
    @classmethod
    def normalize_version(cls, value):
        if value is None:
            return None
        return str(value)


class OntologyDocument(_Record):
    """Root model for a raw ontology description."""

    header: Header = Field(default_factory=Header)
    namespace: list[Namespace] = Field(default_factory=list)
    classes: list[RawClass] = Field(alias="class")
    class_attributes: list[ClassAttribute] = Field(
        default_factory=list, alias="classAttribute"
    )
    datatypes: list[RawClass] = Field(default_factory=list, alias="datatype")
    datatype_attributes: list[ClassAttribute] = Field(
        default_factory=list, alias="datatypeAttribute"
    )
    properties: list[RawProperty] = Field(alias="property")
    property_attributes: list[PropertyAttribute] = Field(
        default_factory=list, alias="propertyAttribute"
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data):
        """Normalize namespaces given as a prefix mapping."""
        if not isinstance(data, dict):
            return data

        namespaces = data.get("namespace")
        if isinstance(namespaces, dict):
            data = dict(data)
            data["namespace"] = [
                {"prefix": prefix, "iri": iri} for prefix, iri in namespaces.items()
            ]
        elif namespaces is None and "namespace" in data:
            data = dict(data)
            data["namespace"] = []

        if data.get("header") is None and "header" in data:
            data = dict(data)
            data.pop("header")

        return data

    def all_classes(self) -> list[RawClass]:
        """Get class and datatype records in declaration order."""
        return [*self.classes, *self.datatypes]

    def all_class_attributes(self) -> list[ClassAttribute]:
        """Get class and datatype attribute records in declaration order."""
        return [*self.class_attributes, *self.datatype_attributes]
