"""Load options - which hits get their backing objects loaded, and how."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from sift.domain.search.model.scope import Scope, combine
from sift.domain.shared.model.value import ValueObject

_GLOBAL_KEYS = frozenset({"only", "except", "except_", "scope", "types"})


def _names(value: Any) -> frozenset[str] | None:
    """Normalize a single type name or an iterable of names."""
    if value is None:
        return None
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, Iterable):
        return frozenset(str(v) for v in value)
    return frozenset({str(value)})


class TypeLoadOptions(ValueObject):
    """Per-type overrides, applied on top of the global options."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    scope: Scope | None = None

    @field_validator("scope", mode="before")
    @classmethod
    def _coerce_scope(cls, value: Any) -> Scope | None:
        return Scope.coerce(value)


class LoadOptions(ValueObject):
    """Global only/except/scope plus per-type overrides keyed by type name.

    Accepts the compact mapping form used by query builders, where any key
    that is not a global option names a document type::

        LoadOptions.model_validate(
            {"only": "city", "scope": lambda o: o.rating > 2, "country": {"scope": ...}}
        )
    """

    model_config = ConfigDict(
        frozen=True, arbitrary_types_allowed=True, populate_by_name=True
    )

    only: frozenset[str] | None = None
    except_: frozenset[str] | None = Field(default=None, alias="except")
    scope: Scope | None = None
    types: dict[str, TypeLoadOptions] = {}

    @model_validator(mode="before")
    @classmethod
    def _collect_type_overrides(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        values = {k: v for k, v in data.items() if k in _GLOBAL_KEYS}
        overrides = {k: v for k, v in data.items() if k not in _GLOBAL_KEYS}
        if overrides:
            values["types"] = {**dict(values.get("types") or {}), **overrides}
        return values

    @field_validator("only", "except_", mode="before")
    @classmethod
    def _coerce_names(cls, value: Any) -> frozenset[str] | None:
        return _names(value)

    @field_validator("scope", mode="before")
    @classmethod
    def _coerce_scope(cls, value: Any) -> Scope | None:
        return Scope.coerce(value)

    def includes(self, type_name: str) -> bool:
        """Whether objects of this type should be loaded at all."""
        if self.only is not None and type_name not in self.only:
            return False
        if self.except_ is not None and type_name in self.except_:
            return False
        return True

    def scope_for(self, type_name: str) -> Scope | None:
        """Global scope AND the type's own scope, if any."""
        overrides = self.types.get(type_name)
        return combine(self.scope, overrides.scope if overrides else None)

    @classmethod
    def build(cls, options: "LoadOptions | Mapping[str, Any] | None") -> "LoadOptions":
        if options is None:
            return cls()
        if isinstance(options, LoadOptions):
            return options
        return cls.model_validate(options)
