"""
Field descriptors for content collections.

A schema is a plain mapping of field name -> FieldSpec. Specs are frozen
data; validation.py turns them into pydantic models.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    URL = "url"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    required: bool = True
    default: Any = None
    choices: Tuple[str, ...] = ()
    item: Optional["FieldSpec"] = None
    properties: Optional[Dict[str, "FieldSpec"]] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def describe(self) -> Dict[str, Any]:
        """JSON-friendly view of the descriptor, nested specs included."""
        out: Dict[str, Any] = {"kind": self.kind.value, "required": self.required}
        if self.has_default:
            out["default"] = self.default
        if self.choices:
            out["choices"] = list(self.choices)
        if self.item is not None:
            out["item"] = self.item.describe()
        if self.properties is not None:
            out["properties"] = {name: spec.describe() for name, spec in self.properties.items()}
        return out


FieldSpec.model_rebuild()


# ============
# Constructors
# ============

def string() -> FieldSpec:
    return FieldSpec(kind=FieldKind.STRING)


def number() -> FieldSpec:
    return FieldSpec(kind=FieldKind.NUMBER)


def boolean(default: Optional[bool] = None) -> FieldSpec:
    return FieldSpec(kind=FieldKind.BOOLEAN, required=default is None, default=default)


def date() -> FieldSpec:
    return FieldSpec(kind=FieldKind.DATE)


def url() -> FieldSpec:
    return FieldSpec(kind=FieldKind.URL)


def enum(*choices: str, default: Optional[str] = None) -> FieldSpec:
    if not choices:
        raise ValueError("enum() needs at least one choice")
    if default is not None and default not in choices:
        raise ValueError(f"default {default!r} is not one of {choices!r}")
    return FieldSpec(
        kind=FieldKind.ENUM,
        required=default is None,
        default=default,
        choices=tuple(choices),
    )


def array(item: FieldSpec) -> FieldSpec:
    return FieldSpec(kind=FieldKind.ARRAY, item=item)


def obj(**fields: FieldSpec) -> FieldSpec:
    return FieldSpec(kind=FieldKind.OBJECT, properties=fields)


def optional(spec: FieldSpec) -> FieldSpec:
    """Same descriptor, but the key may be absent."""
    return spec.model_copy(update={"required": False})
