"""Connection manager (``/api/v2/connections``)."""

from ..core.exceptions import ConnectionLookupError, ValidationError
from ..core.options import OptionArg, parameter
from ..models.connection import Connection
from ..utils.logging_utils import get_logger
from .base import ResourceManager

logger = get_logger(__name__)


class ConnectionManager(ResourceManager):
    """CRUD operations on connections, plus name to ID resolution."""

    resource = "connections"
    envelope_key = "connections"

    def create(self, connection: Connection) -> Connection:
        """Create a connection and return it as stored by the API."""
        self._check_payload(connection, Connection)
        body = self.m.post(self.m.uri(self.resource), connection)
        return Connection.from_dict(body) if body else connection

    def read(self, connection_id: str, *options: OptionArg) -> Connection:
        """Get a connection by ID.

        Raises:
            NotFoundError: If the connection does not exist
        """
        self._check_id(connection_id)
        body = self.m.get(self.m.uri(self.resource, connection_id) + self.m.q(options))
        return Connection.from_dict(body)

    def update(self, connection_id: str, connection: Connection) -> Connection:
        """Patch a connection; only set fields are sent."""
        self._check_id(connection_id)
        self._check_payload(connection, Connection)
        body = self.m.patch(self.m.uri(self.resource, connection_id), connection)
        return Connection.from_dict(body) if body else connection

    def delete(self, connection_id: str) -> None:
        """Delete a connection."""
        self._check_id(connection_id)
        self.m.delete(self.m.uri(self.resource, connection_id))

    def get_connection_id(self, name: str) -> str:
        """Resolve a connection name to its ID.

        Lists connections filtered by ``name`` asking only for the ``id``
        field. A failing list call raises its own error; the match count is
        only checked once the call has succeeded.

        Raises:
            ConnectionLookupError: If zero or several connections match
        """
        matches = self.list(parameter("name", name), parameter("fields", "id"))
        if len(matches) != 1:
            logger.debug(
                f"Connection name {name!r} matched {len(matches)} connections",
                extra={"resource": self.resource, "operation": "get_connection_id"},
            )
            raise ConnectionLookupError(name, len(matches))

        connection_id = matches[0].id
        if not isinstance(connection_id, str):
            raise ValidationError(
                f"Connection {name} was returned without an id", field="id"
            )
        return connection_id

    def list(self, *options: OptionArg) -> list[Connection]:
        """List connections, e.g. filtered with ``parameter("strategy", ...)``."""
        body = self.m.get(self.m.uri(self.resource) + self.m.q(options))
        return Connection.from_list(self._unwrap(body))
