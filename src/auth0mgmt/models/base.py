"""Presence-tracking base for Management API records.

Every field of a :class:`Resource` is three-valued:

* ``UNSET``: absent, never serialized
* ``None``: explicit JSON ``null``
* anything else: the value

so a record fetched from the API serializes back to exactly the keys it
was built from.
"""

import copy
import json
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypeAlias, TypeVar, Union

from auth0mgmt.core.exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R", bound="Resource")

JSONValue: TypeAlias = Union[
    None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]
]


class UnsetType:
    """Type of the ``UNSET`` sentinel."""

    _instance: "UnsetType | None" = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "UnsetType":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "UnsetType":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = UnsetType()

# A field that may be absent, null, or hold a T
Maybe: TypeAlias = Union[T, None, UnsetType]


def attr(json_key: str | None = None, model: type["Resource"] | None = None) -> Any:
    """Declare an optional record field.

    Args:
        json_key: Key used on the wire when it differs from the attribute name
        model: Nested Resource type the JSON object is parsed into

    Returns:
        A dataclass field defaulting to ``UNSET``
    """
    metadata: dict[str, Any] = {}
    if json_key is not None:
        metadata["json"] = json_key
    if model is not None:
        metadata["model"] = model
    return field(default=UNSET, metadata=metadata)


def _dump(value: Any) -> JSONValue:
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(k): _dump(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    return copy.deepcopy(value)


@dataclass(kw_only=True)
class Resource:
    """Base class for JSON request/response bodies.

    Subclasses declare their fields with :func:`attr`. Classes that set
    ``_keep_unknown`` keep keys they do not declare in ``extra`` so that
    provider-specific settings survive a fetch and re-send.
    """

    _keep_unknown: ClassVar[bool] = False

    extra: dict[str, JSONValue] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        # A declared key in extra would shadow or be shadowed by its field.
        clashes = sorted(set(self.extra) & set(self._json_fields()))
        if clashes:
            raise ValidationError(
                f"extra of {type(self).__name__} repeats declared keys",
                field="extra",
                value=", ".join(clashes),
            )

    @classmethod
    def _json_fields(cls) -> dict[str, Any]:
        return {
            f.metadata.get("json", f.name): f
            for f in fields(cls)
            if f.name != "extra"
        }

    @classmethod
    def from_dict(cls: type[R], data: dict[str, JSONValue]) -> R:
        """Build a record from a decoded JSON object.

        Args:
            data: JSON object as returned by the API

        Returns:
            A record whose set fields are exactly the keys present in ``data``

        Raises:
            ValidationError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected a JSON object for {cls.__name__}",
                value=type(data).__name__,
            )

        known = cls._json_fields()
        kwargs: dict[str, Any] = {}
        extra: dict[str, JSONValue] = {}
        for key, value in data.items():
            f = known.get(key)
            if f is None:
                if cls._keep_unknown:
                    extra[key] = copy.deepcopy(value)
                continue

            model = f.metadata.get("model")
            if model is not None and isinstance(value, dict):
                kwargs[f.name] = model.from_dict(value)
            else:
                kwargs[f.name] = copy.deepcopy(value)

        return cls(extra=extra, **kwargs)

    @classmethod
    def from_list(cls: type[R], items: list[dict[str, JSONValue]] | None) -> list[R]:
        """Build records from a decoded JSON array."""
        if items is None:
            return []
        if not isinstance(items, list):
            raise ValidationError(
                f"Expected a JSON array of {cls.__name__}",
                value=type(items).__name__,
            )
        return [cls.from_dict(item) for item in items]

    def to_dict(self) -> dict[str, JSONValue]:
        """Serialize set fields only; ``None`` becomes ``null``."""
        data: dict[str, JSONValue] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is UNSET:
                continue
            data[f.metadata.get("json", f.name)] = _dump(value)

        for key, value in self.extra.items():
            data[key] = _dump(value)
        return data

    def is_set(self, name: str) -> bool:
        """Return True if the attribute ``name`` is present (null counts)."""
        return getattr(self, name) is not UNSET

    def set_fields(self) -> list[str]:
        """Names of the attributes that are present."""
        return [f.name for f in fields(self) if f.name != "extra" and self.is_set(f.name)]

    def get(self, name: str, default: T | None = None) -> Any:
        """Return the attribute value, or ``default`` when absent or null."""
        value = getattr(self, name)
        if value is UNSET or value is None:
            return default
        return value

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
