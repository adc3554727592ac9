"""Shared plumbing for resource managers."""

from typing import TYPE_CHECKING, Any

from ..core.exceptions import ValidationError
from ..models.base import JSONValue, Resource

if TYPE_CHECKING:
    from ..core.client import Management


class ResourceManager:
    """Base for per-resource managers holding the shared transport."""

    # Collection path segment, e.g. "connections"
    resource: str = ""
    # Key of the list in an include_totals envelope
    envelope_key: str = ""

    def __init__(self, m: "Management") -> None:
        """Initialize with the shared transport.

        Args:
            m: Management transport
        """
        self.m = m

    def _check_id(self, resource_id: str) -> None:
        if not isinstance(resource_id, str) or not resource_id.strip():
            raise ValidationError(
                f"A non-empty {self.resource} ID is required",
                field="id",
                value=repr(resource_id),
            )

    def _check_payload(self, payload: Any, model: type[Resource]) -> None:
        if not isinstance(payload, model):
            raise ValidationError(
                f"Expected a {model.__name__} payload",
                value=type(payload).__name__,
            )

    def _unwrap(self, body: JSONValue) -> Any:
        """Return the item array from a bare or ``include_totals`` response."""
        if isinstance(body, dict) and self.envelope_key in body:
            return body[self.envelope_key]
        return body
