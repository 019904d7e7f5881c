"""OpenAPI file loader — implements SpecLoaderPort.

Reads a YAML or JSON API description, dereferences every ``$ref`` the
rules can reach (schemas, responses, parameters, path items, security
schemes) and builds the ``Document`` model.

Key capabilities:

* **Directory discovery** — a directory target is searched for the usual
  ``openapi.yaml`` / ``swagger.json`` / ``api.yml`` file names.
* **Local and relative-file references** — ``#/components/schemas/User``
  and ``common.yaml#/components/schemas/Error`` are both resolved.
* **Shared schema nodes** — every referenced schema location maps to one
  ``Schema`` instance, so recursive schemas become cyclic object graphs
  instead of infinite trees.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import unquote

import yaml

from specgrade.domain.errors import SpecLoadError
from specgrade.domain.models.document import (
    Components,
    Document,
    ExampleValue,
    Info,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
    SecurityScheme,
)
from specgrade.domain.ports.spec_loader import SpecLoaderPort

logger = logging.getLogger(__name__)

SPEC_FILE_NAMES: tuple[str, ...] = (
    "openapi.yaml",
    "openapi.yml",
    "openapi.json",
    "swagger.yaml",
    "swagger.yml",
    "swagger.json",
    "api.yaml",
    "api.yml",
    "api.json",
)

# Guards against $ref chains that point at each other without end
_MAX_REF_CHAIN = 64

_Location = tuple[Path, str]


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


def find_spec_file(target: Path) -> Path:
    """Return *target* if it is a file, else the first known spec file inside it."""
    if target.is_file():
        return target
    if target.is_dir():
        for name in SPEC_FILE_NAMES:
            candidate = target / name
            if candidate.is_file():
                return candidate
        raise SpecLoadError(f"No OpenAPI spec file found in directory: {target}")
    raise SpecLoadError(f"Path not found: {target}")


def read_spec_file(path: Path) -> dict[str, Any]:
    """Parse a YAML or JSON file and require a mapping at its root.

    ``.json`` files go through ``json``: PyYAML follows YAML 1.1 and
    reads numbers such as ``1e3`` as strings.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"Cannot read {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"Failed to parse {path}: {exc}") from exc
    except RecursionError as exc:
        raise SpecLoadError(f"Failed to parse {path}: nesting too deep") from exc

    if not isinstance(raw, dict):
        raise SpecLoadError(f"{path} does not contain an OpenAPI object")
    return raw


def _text(value: Any) -> str:
    """Coerce a scalar to text; YAML turns ``version: 1.0`` into a float."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _mapping(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SpecLoadError(f"Expected a mapping at {where}, got {type(value).__name__}")
    return value


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _schema_type(value: Any) -> str:
    """OpenAPI 3.1 allows ``type: [string, "null"]``; keep the first real type."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        for item in value:
            if isinstance(item, str) and item != "null":
                return item
    return ""


# ---------------------------------------------------------------------------
# Document builder
# ---------------------------------------------------------------------------


class _DocumentBuilder:
    """Single-use builder that owns the caches for one load."""

    def __init__(self, root_path: Path, root: dict[str, Any]) -> None:
        self._root_path = root_path.resolve()
        self._files: dict[Path, dict[str, Any]] = {self._root_path: root}
        self._schemas: dict[_Location, Schema] = {}

    # -- References ------------------------------------------------------

    def _file(self, path: Path) -> dict[str, Any]:
        path = path.resolve()
        if path not in self._files:
            logger.debug("Loading referenced file %s", path)
            self._files[path] = read_spec_file(path)
        return self._files[path]

    def _pointer(self, doc: Any, pointer: str, ref: str) -> Any:
        node = doc
        for token in pointer.split("/")[1:] if pointer else []:
            token = unquote(token).replace("~1", "/").replace("~0", "~")
            if isinstance(node, dict) and token in node:
                node = node[token]
            elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
                node = node[int(token)]
            else:
                raise SpecLoadError(f"Unresolvable reference: {ref}")
        return node

    def _follow(self, node: Any, base: Path) -> tuple[Any, Path, Optional[str]]:
        """Follow a ``$ref`` chain to the first non-reference node.

        Returns the node, the file it lives in and its JSON pointer (or
        ``None`` when *node* was not a reference at all).
        """
        pointer: Optional[str] = None
        for _ in range(_MAX_REF_CHAIN):
            if not (isinstance(node, dict) and isinstance(node.get("$ref"), str)):
                return node, base, pointer
            ref = node["$ref"]
            file_part, _, pointer = ref.partition("#")
            if file_part:
                base = (base.parent / file_part).resolve()
            node = self._pointer(self._file(base), pointer, ref)
        raise SpecLoadError(f"Reference chain too long near {pointer!r} in {base}")

    # -- Schemas ---------------------------------------------------------

    def schema(self, node: Any, base: Path, pointer: Optional[str] = None) -> Schema:
        """Build (or reuse) the ``Schema`` for *node*.

        Referenced and named component schemas are cached by location,
        so two references to the same schema yield the same object.
        """
        target, base, ref_pointer = self._follow(node, base)
        if ref_pointer is not None:
            pointer = ref_pointer

        if pointer is not None:
            key = (base, pointer)
            cached = self._schemas.get(key)
            if cached is not None:
                return cached
            schema = Schema()
            # cache before filling so a cycle back to this node finds it
            self._schemas[key] = schema
        else:
            schema = Schema()

        # 3.1 permits boolean schemas; they carry no type or example
        node = {} if isinstance(target, bool) else _mapping(target, f"schema {pointer or ''}")
        self._fill_schema(schema, node, base, pointer)
        return schema

    def _fill_schema(
        self, schema: Schema, node: dict, base: Path, pointer: Optional[str]
    ) -> None:
        schema.type = _schema_type(node.get("type"))
        schema.description = _text(node.get("description"))
        if node.get("example") is not None:
            schema.example = ExampleValue.of(node["example"])
        required = node.get("required")
        if isinstance(required, list):
            schema.required = frozenset(str(r) for r in required)

        properties = _mapping(node.get("properties"), f"{pointer or 'schema'}/properties")
        for name, child in properties.items():
            child_pointer = (
                f"{pointer}/properties/{_escape(str(name))}" if pointer is not None else None
            )
            schema.properties[str(name)] = self.schema(child, base, child_pointer)

    # -- Sections --------------------------------------------------------

    def info(self, root: dict) -> Optional[Info]:
        if "info" not in root or root["info"] is None:
            return None
        node = _mapping(root["info"], "info")
        return Info(
            title=_text(node.get("title")),
            version=_text(node.get("version")),
            description=_text(node.get("description")),
        )

    def components(self, root: dict) -> Optional[Components]:
        if "components" not in root or root["components"] is None:
            return None
        node = _mapping(root["components"], "components")

        schemas = {
            str(name): self.schema(
                value, self._root_path, f"/components/schemas/{_escape(str(name))}"
            )
            for name, value in _mapping(node.get("schemas"), "components/schemas").items()
        }

        schemes: dict[str, SecurityScheme] = {}
        raw_schemes = _mapping(node.get("securitySchemes"), "components/securitySchemes")
        for name, value in raw_schemes.items():
            target, _, _ = self._follow(value, self._root_path)
            target = _mapping(target, f"components/securitySchemes/{name}")
            schemes[str(name)] = SecurityScheme(
                type=_text(target.get("type")),
                scheme=_text(target.get("scheme")),
                name=_text(target.get("name")),
                location=_text(target.get("in")),
                description=_text(target.get("description")),
            )

        return Components(schemas=schemas, security_schemes=schemes)

    def paths(self, root: dict) -> dict[str, PathItem]:
        items: dict[str, PathItem] = {}
        for path, value in _mapping(root.get("paths"), "paths").items():
            node, base, _ = self._follow(value, self._root_path)
            node = _mapping(node, f"paths/{path}")
            ops = {
                method: self.operation(node[method], base, f"paths/{path}/{method}")
                for method in ("get", "post", "put", "delete", "patch", "head", "options")
                if node.get(method) is not None
            }
            items[str(path)] = PathItem(**ops)
        return items

    def operation(self, value: Any, base: Path, where: str) -> Operation:
        node = _mapping(value, where)

        parameters = []
        raw_params = node.get("parameters") or []
        if not isinstance(raw_params, list):
            raise SpecLoadError(f"Expected a list at {where}/parameters")
        for raw in raw_params:
            param, param_base, _ = self._follow(raw, base)
            param = _mapping(param, f"{where}/parameters")
            schema = param.get("schema")
            parameters.append(
                Parameter(
                    name=_text(param.get("name")),
                    location=_text(param.get("in")),
                    required=bool(param.get("required", False)),
                    schema=self.schema(schema, param_base) if schema is not None else None,
                )
            )

        responses: Optional[dict[str, Response]] = None
        if node.get("responses") is not None:
            responses = {}
            for code, raw in _mapping(node["responses"], f"{where}/responses").items():
                target, _, _ = self._follow(raw, base)
                target = _mapping(target, f"{where}/responses/{code}")
                # YAML reads an unquoted 400 as an int
                responses[str(code)] = Response(description=_text(target.get("description")))

        return Operation(
            operation_id=_text(node.get("operationId")),
            description=_text(node.get("description")),
            summary=_text(node.get("summary")),
            parameters=tuple(parameters),
            responses=responses,
        )


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


class OpenAPIFileLoader(SpecLoaderPort):
    """Load an OpenAPI 3.x description from disk.

    Usage::

        loader = OpenAPIFileLoader()
        document = loader.load(Path("specs/"))
    """

    def load(self, target: Path) -> Document:
        path = find_spec_file(Path(target))
        logger.info("Loading API description from %s", path)
        root = read_spec_file(path)

        builder = _DocumentBuilder(path, root)
        try:
            return Document(
                info=builder.info(root),
                paths=builder.paths(root),
                components=builder.components(root),
                spec_version=_text(root.get("openapi") or root.get("swagger")),
                source=str(path),
            )
        except RecursionError as exc:
            raise SpecLoadError(f"Schema nesting in {path} is too deep to load") from exc
