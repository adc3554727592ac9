"""Client grant record."""

from dataclasses import dataclass

from auth0mgmt.models.base import Maybe, Resource, attr


@dataclass(kw_only=True)
class ClientGrant(Resource):
    """Grant allowing a client to call an API (audience) with a set of scopes."""

    _keep_unknown = True

    # A generated string identifying the client grant.
    id: Maybe[str] = attr()

    # The identifier of the client.
    client_id: Maybe[str] = attr()

    # The audience (API identifier).
    audience: Maybe[str] = attr()

    scope: Maybe[list[str]] = attr()
