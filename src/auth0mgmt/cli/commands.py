"""Command handlers behind the click CLI."""

from typing import Any

from ..core.auth import doctor
from ..core.client import Management
from ..core.options import RequestOption, parameter
from ..models.client_grant import ClientGrant
from ..utils.logging_utils import get_logger
from ..utils.rich_utils import get_console, print_resource, print_resource_table

logger = get_logger(__name__)

GRANT_COLUMNS = ("id", "client_id", "audience", "scope")
CONNECTION_COLUMNS = ("id", "name", "strategy", "enabled_clients")


class CommandHandler:
    """Runs CLI commands against one environment's Management API."""

    def __init__(self, env: str = "dev", management: Management | None = None) -> None:
        """Initialize the handler.

        Args:
            env: Environment to use ('dev' or 'prod')
            management: Transport to use; built from the environment when omitted
        """
        self.env = env
        self._management = management
        self.console = get_console()

    @property
    def management(self) -> Management:
        if self._management is None:
            self._management = Management.from_env(self.env)
        return self._management

    def handle_doctor(self, test_api: bool) -> bool:
        """Print credential status and return whether everything works."""
        result: dict[str, Any] = doctor(self.env, test_api)
        style = "success" if result["success"] else "error"
        self.console.print(f"[{style}]{result['details']}[/{style}]")
        for key in ("domain", "client_id", "api_status", "error"):
            if key in result:
                self.console.print(f"  {key}: {result[key]}")
        return bool(result["success"])

    # Client grants

    def list_client_grants(
        self, audience: str | None = None, client_id: str | None = None
    ) -> None:
        options: list[RequestOption] = []
        if audience:
            options.append(parameter("audience", audience))
        if client_id:
            options.append(parameter("client_id", client_id))
        grants = self.management.client_grant.list(*options)
        print_resource_table("Client grants", grants, GRANT_COLUMNS, self.console)

    def show_client_grant(self, grant_id: str) -> None:
        print_resource(self.management.client_grant.read(grant_id), self.console)

    def create_client_grant(
        self, client_id: str, audience: str, scopes: tuple[str, ...]
    ) -> None:
        grant = ClientGrant(client_id=client_id, audience=audience, scope=list(scopes))
        created = self.management.client_grant.create(grant)
        logger.info(
            f"Created client grant {created.get('id')}",
            extra={"operation": "create", "resource": "client-grants"},
        )
        print_resource(created, self.console)

    def delete_client_grant(self, grant_id: str) -> None:
        self.management.client_grant.delete(grant_id)
        self.console.print(f"[success]Deleted client grant {grant_id}[/success]")

    # Connections

    def list_connections(
        self, name: str | None = None, strategy: str | None = None
    ) -> None:
        options: list[RequestOption] = []
        if name:
            options.append(parameter("name", name))
        if strategy:
            options.append(parameter("strategy", strategy))
        connections = self.management.connection.list(*options)
        print_resource_table(
            "Connections", connections, CONNECTION_COLUMNS, self.console
        )

    def show_connection(self, connection_id: str) -> None:
        print_resource(self.management.connection.read(connection_id), self.console)

    def show_connection_id(self, name: str) -> None:
        self.console.print(self.management.connection.get_connection_id(name))

    def delete_connection(self, connection_id: str) -> None:
        self.management.connection.delete(connection_id)
        self.console.print(f"[success]Deleted connection {connection_id}[/success]")
