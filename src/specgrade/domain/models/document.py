"""Normalized, reference-resolved model of an OpenAPI description.

Contains Info, Operation, PathItem, Schema, Components and Document —
the aggregate root that every rule reads.

The model is produced by a loader (see ``SpecLoaderPort``) with all
``$ref`` pointers already dereferenced. Schemas form a graph rather than
a tree: a property may point back at one of its ancestors, so ``Schema``
compares and hashes by identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


# ---------------------------------------------------------------------------
# Example values (tagged union)
# ---------------------------------------------------------------------------


class ExampleKind(str, Enum):
    """Variant tag of an ``ExampleValue``."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NULL = "null"


@dataclass(frozen=True)
class ExampleValue:
    """A schema ``example`` classified into one variant of ``ExampleKind``."""

    kind: ExampleKind
    value: Any = None

    @classmethod
    def of(cls, raw: Any) -> ExampleValue:
        """Classify a plain Python value decoded from YAML/JSON."""
        # bool is a subclass of int, so it must be tested first
        if raw is None:
            return cls(ExampleKind.NULL)
        if isinstance(raw, bool):
            return cls(ExampleKind.BOOL, raw)
        if isinstance(raw, int):
            return cls(ExampleKind.INTEGER, raw)
        if isinstance(raw, float):
            return cls(ExampleKind.FLOAT, raw)
        if isinstance(raw, str):
            return cls(ExampleKind.STRING, raw)
        if isinstance(raw, (list, tuple)):
            return cls(ExampleKind.SEQUENCE, list(raw))
        if isinstance(raw, dict):
            return cls(ExampleKind.MAPPING, dict(raw))
        # dates and other scalars YAML may produce are textual in the source
        return cls(ExampleKind.STRING, str(raw))

    def __str__(self) -> str:
        if self.kind is ExampleKind.NULL:
            return "null"
        if self.kind is ExampleKind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Schema:
    """A (possibly cyclic) schema node.

    ``type`` is one of string/integer/number/boolean/array/object, or an
    empty string when the schema does not declare one.
    """

    type: str = ""
    example: Optional[ExampleValue] = None
    properties: dict[str, Schema] = field(default_factory=dict)
    required: frozenset[str] = frozenset()
    description: str = ""

    def __repr__(self) -> str:
        # default dataclass repr would recurse forever on cyclic graphs
        props = ", ".join(self.properties)
        return f"Schema(type={self.type!r}, properties=[{props}])"


@dataclass(frozen=True)
class SecurityScheme:
    """A ``components.securitySchemes`` entry."""

    type: str = ""
    scheme: str = ""
    name: str = ""
    location: str = ""
    description: str = ""


@dataclass(frozen=True)
class Components:
    """The ``components`` section; only the parts rules read."""

    schemas: dict[str, Schema] = field(default_factory=dict)
    security_schemes: dict[str, SecurityScheme] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Paths & Operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Parameter:
    """An operation parameter."""

    name: str
    location: str = ""
    required: bool = False
    schema: Optional[Schema] = None


@dataclass(frozen=True)
class Response:
    """A single response entry keyed by status code."""

    description: str = ""


@dataclass(frozen=True)
class Operation:
    """One HTTP operation. Empty strings mean "not provided"."""

    operation_id: str = ""
    description: str = ""
    summary: str = ""
    parameters: tuple[Parameter, ...] = ()
    responses: Optional[dict[str, Response]] = None


@dataclass(frozen=True)
class PathItem:
    """Up to one ``Operation`` per HTTP method; ``None`` means not defined."""

    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    patch: Optional[Operation] = None
    head: Optional[Operation] = None
    options: Optional[Operation] = None

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(METHOD, operation)`` for defined operations, in method order."""
        for method in HTTP_METHODS:
            op = getattr(self, method.lower())
            if op is not None:
                yield method, op


# ---------------------------------------------------------------------------
# Document (Aggregate Root)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Info:
    """The ``info`` section."""

    title: str = ""
    version: str = ""
    description: str = ""


@dataclass(frozen=True)
class Document:
    """Complete API description as seen by the rules.

    ``info`` and ``components`` are ``None`` when the section is absent.
    ``spec_version`` is the document's own ``openapi`` field.
    """

    info: Optional[Info] = None
    paths: dict[str, PathItem] = field(default_factory=dict)
    components: Optional[Components] = None
    spec_version: str = ""
    source: str = ""

    def operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield ``(path, METHOD, operation)`` for every defined operation."""
        for path, item in self.paths.items():
            for method, op in item.operations():
                yield path, method, op
