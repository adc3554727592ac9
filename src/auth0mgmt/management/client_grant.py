"""Client grant manager (``/api/v2/client-grants``)."""

from ..core.exceptions import NotFoundError
from ..core.options import OptionArg
from ..models.client_grant import ClientGrant
from ..utils.logging_utils import get_logger
from .base import ResourceManager

logger = get_logger(__name__)


class ClientGrantManager(ResourceManager):
    """CRUD operations on client grants."""

    resource = "client-grants"
    envelope_key = "client_grants"

    def create(self, grant: ClientGrant) -> ClientGrant:
        """Create a client grant and return it as stored by the API."""
        self._check_payload(grant, ClientGrant)
        body = self.m.post(self.m.uri(self.resource), grant)
        return ClientGrant.from_dict(body) if body else grant

    def read(self, grant_id: str) -> ClientGrant:
        """Find a client grant by ID.

        The API has no single-grant endpoint, so this lists all grants and
        returns the first with an exactly matching ``id``.

        Raises:
            NotFoundError: If no grant in the list has the ID
            ManagementAPIError: If listing fails
        """
        self._check_id(grant_id)
        for grant in self.list():
            if grant.id == grant_id:
                return grant

        logger.debug(
            f"Client grant {grant_id} not found",
            extra={"resource": self.resource, "resource_id": grant_id},
        )
        raise NotFoundError(
            "Client grant not found", endpoint=self.m.uri(self.resource)
        )

    def update(self, grant_id: str, grant: ClientGrant) -> ClientGrant:
        """Patch a client grant; only set fields are sent."""
        self._check_id(grant_id)
        self._check_payload(grant, ClientGrant)
        body = self.m.patch(self.m.uri(self.resource, grant_id), grant)
        return ClientGrant.from_dict(body) if body else grant

    def delete(self, grant_id: str) -> None:
        """Delete a client grant."""
        self._check_id(grant_id)
        self.m.delete(self.m.uri(self.resource, grant_id))

    def list(self, *options: OptionArg) -> list[ClientGrant]:
        """List client grants, e.g. filtered with ``parameter("audience", ...)``."""
        body = self.m.get(self.m.uri(self.resource) + self.m.q(options))
        return ClientGrant.from_list(self._unwrap(body))
