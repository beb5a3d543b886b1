"""Base model for api.congress.gov payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class _KeyIndex:
    # casefolded key -> canonical key (field name or alias)
    canonical: dict[str, str]
    # canonical keys whose field falls back to a non-None default on null
    defaulted: frozenset[str]


_KEY_INDEXES: dict[type, _KeyIndex] = {}


class CongressModel(BaseModel):
    """Record or page returned by the API.

    Field names are snake_case with camelCase aliases matching the wire
    format. Incoming keys are matched case-insensitively, and unknown keys
    are kept (see ``extension_data``) so payloads survive schema additions.
    A null sent for a field that has a non-None default (empty string,
    empty list) yields that default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        index = _key_index(cls)
        matched: dict[Any, Any] = {}
        for key, value in data.items():
            canonical = index.canonical.get(key.casefold()) if isinstance(key, str) else None
            if canonical is None:
                matched[key] = value
            elif value is None and canonical in index.defaulted:
                continue
            else:
                matched[canonical] = value
        return matched

    @property
    def extension_data(self) -> dict[str, Any]:
        """Keys the model does not declare, preserved verbatim."""
        return dict(self.model_extra or {})

    def to_wire(self) -> dict[str, Any]:
        """Dump with wire (camelCase) keys, extension data included."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _key_index(cls: type[CongressModel]) -> _KeyIndex:
    index = _KEY_INDEXES.get(cls)
    if index is not None:
        return index

    canonical: dict[str, str] = {}
    defaulted: set[str] = set()
    for name, info in cls.model_fields.items():
        keys = [name] + ([info.alias] if info.alias else [])
        for key in keys:
            canonical[key.casefold()] = key
        if not info.is_required() and (
            info.default_factory is not None or info.default is not None
        ):
            defaulted.update(keys)

    index = _KeyIndex(canonical=canonical, defaulted=frozenset(defaulted))
    _KEY_INDEXES[cls] = index
    return index
