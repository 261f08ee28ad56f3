"""Result - typed, read-only view over one search hit."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class Result(BaseModel):
    """Base class for typed search results.

    Subclass this to declare the fields a document type exposes. Field
    annotations double as coercion rules: values from the hit's ``_source``
    are validated in lax mode (``"3"`` becomes ``3`` for an ``int`` field) and
    a value that does not coerce becomes ``None`` instead of failing the whole
    result. Declare fields as ``T | None = None``; any declared field may end
    up empty.

    Hit metadata is attached as private attributes: ``_score``,
    ``_explanation`` and ``_data`` (the hit mapping itself).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Any = None

    __id_field__: ClassVar[str] = "id"
    __adapters__: ClassVar[dict[str, TypeAdapter[Any]]] = {}

    _score: float | None = PrivateAttr(default=None)
    _explanation: Any = PrivateAttr(default=None)
    _data: Mapping[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__adapters__ = {
            name: TypeAdapter(info.rebuild_annotation())
            for name, info in cls.model_fields.items()
        }

    @classmethod
    def from_hit(cls, hit: Mapping[str, Any]) -> Result:
        """Build a result from a raw hit document.

        Every declared field is read from ``_source``. The identity field
        falls back to the hit's ``_id`` exactly as the engine reported it,
        without coercion: responses that carry no stored fields still carry
        identity.
        """
        source = hit.get("_source")
        if not isinstance(source, Mapping):
            source = {}

        values: dict[str, Any] = {}
        for name in cls.model_fields:
            values[name] = cls._coerce(name, source[name]) if name in source else None

        id_field = cls.__id_field__
        if values.get(id_field) is None and "_id" in hit:
            values[id_field] = hit["_id"]

        result = cls.model_construct(**values)
        result._score = hit.get("_score")
        result._explanation = hit.get("_explanation")
        result._data = hit
        return result

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        if value is None:
            return None
        try:
            return cls.__adapters__[name].validate_python(value)
        except PydanticValidationError:
            logger.debug("Dropping %s.%s: cannot coerce %r", cls.__name__, name, value)
            return None

    @property
    def _source(self) -> Mapping[str, Any] | None:
        return self._data.get("_source")

    @property
    def _highlight(self) -> Mapping[str, Any] | None:
        return self._data.get("highlight")

    @property
    def _sort(self) -> list[Any] | None:
        return self._data.get("sort")

    @property
    def _version(self) -> int | None:
        return self._data.get("_version")

    @property
    def _index(self) -> str | None:
        return self._data.get("_index")

    @property
    def _type(self) -> str | None:
        return self._data.get("_type")


Result.__adapters__ = {"id": TypeAdapter(Any)}
