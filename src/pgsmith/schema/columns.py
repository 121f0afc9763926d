"""
Column attribute model shared by CREATE TABLE and ALTER TABLE.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Mapping, Tuple, Union

from ..dialects.base import Dialect
from ..errors import InvalidArgument

Length = Union[int, Tuple[int, int]]

LEGACY_KEYS = {
    "type": "type",
    "length": "length",
    "list": "is_list",
    "attribute": "attribute",
    "unique": "unique",
    "null": "nullable",
    "default": "default",
    "name": "rename",
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _check_length(value: Any) -> None:
    if isinstance(value, tuple):
        if len(value) != 2 or not all(
            isinstance(part, int) and not isinstance(part, bool) and part >= 0 for part in value
        ):
            raise InvalidArgument(
                f"length pair must be (precision, scale) of non-negative integers, got {value!r}."
            )
        return
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise InvalidArgument(f"length must be a positive integer, got {value!r}.")


@dataclass(frozen=True)
class ColumnSpec:
    """
    Type and constraints of a single column.

    ``nullable`` is tri-state: ``None`` renders nothing, ``True`` renders
    ``DEFAULT NULL`` and ``False`` renders ``NOT NULL``. ``default`` is only
    rendered when ``nullable`` is not ``True`` and the value is a string or a
    number; other values are dropped. ``rename`` only applies to ALTER TABLE.
    """

    type: str | None = None
    length: Length | None = None
    is_list: bool = False
    attribute: str | None = None
    unique: bool = False
    nullable: bool | None = None
    default: Any = None
    rename: str | None = None

    def __post_init__(self) -> None:
        if self.type is not None and (not isinstance(self.type, str) or not self.type):
            raise InvalidArgument(f"type must be a non-empty string, got {self.type!r}.")
        if self.length is not None:
            _check_length(self.length)
        if self.attribute is not None and not isinstance(self.attribute, str):
            raise InvalidArgument(f"attribute must be a string, got {self.attribute!r}.")
        if self.nullable is not None and not isinstance(self.nullable, bool):
            raise InvalidArgument(f"nullable must be a bool or None, got {self.nullable!r}.")
        if self.rename is not None and (not isinstance(self.rename, str) or not self.rename):
            raise InvalidArgument(f"rename must be a non-empty string, got {self.rename!r}.")

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> "ColumnSpec":
        """
        Build a spec from the dictionary form (``type``, ``length``, ``list``,
        ``attribute``, ``unique``, ``null``, ``default``, ``name``).
        """

        if not isinstance(attributes, Mapping):
            raise InvalidArgument(
                f"Column attributes must be a mapping, got {type(attributes).__name__}."
            )
        unknown = sorted(set(attributes) - set(LEGACY_KEYS))
        if unknown:
            raise InvalidArgument(f"Unknown column attribute(s): {', '.join(unknown)}")
        values = {LEGACY_KEYS[key]: value for key, value in attributes.items()}
        for flag in ("is_list", "unique"):
            if flag in values:
                values[flag] = bool(values[flag])
        if values.get("nullable") is not None:
            values["nullable"] = bool(values["nullable"])
        return cls(**values)

    @classmethod
    def coerce(cls, value: "ColumnSpec | Mapping[str, Any]") -> "ColumnSpec":
        if isinstance(value, ColumnSpec):
            return value
        return cls.from_mapping(value)

    def type_clause(self) -> str | None:
        if self.type is None:
            return None
        clause = self.type
        if self.length is not None:
            if isinstance(self.length, tuple):
                clause += f"({self.length[0]}, {self.length[1]})"
            else:
                clause += f"({self.length})"
        if self.is_list:
            clause += "[]"
        return clause

    def render(self, dialect: Dialect) -> List[str]:
        """
        Return the attribute fragments that follow the column name, in order.
        """

        parts: List[str] = []
        type_clause = self.type_clause()
        if type_clause:
            parts.append(type_clause)
        if self.attribute:
            parts.append(self.attribute)
        if self.unique:
            parts.append("UNIQUE")
        if self.nullable is False:
            parts.append("NOT NULL")
        elif self.nullable is True:
            parts.append("DEFAULT NULL")
        default_clause = self._default_clause(dialect)
        if default_clause:
            parts.append(default_clause)
        return parts

    def _default_clause(self, dialect: Dialect) -> str | None:
        if self.default is None or self.nullable is True:
            return None
        if isinstance(self.default, str):
            return f"DEFAULT {dialect.quote_literal(self.default)}"
        if _is_number(self.default):
            return f"DEFAULT {self.default}"
        return None


def render_column(name: str, spec: ColumnSpec, dialect: Dialect, *, prefix: str = "") -> str:
    head = f"{prefix}{dialect.quote_identifier(name)}"
    return " ".join([head, *spec.render(dialect)])
