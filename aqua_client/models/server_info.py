"""Server identification record returned by ``get_server_info``."""

from pydantic import BaseModel, ConfigDict


class ServerInfo(BaseModel):
    """Protocol and server compatibility information.

    Attributes:
        api_version: Protocol version implemented by the server.
    """

    model_config = ConfigDict(frozen=True)

    api_version: str
