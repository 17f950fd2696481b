"""Exception hierarchy for the Aqua client.

Usage:
    from aqua_client.errors import AquaError, ProtocolError, TransportError

    try:
        info = await client.get_server_info()
    except TransportError:
        ...  # retry later
    except ProtocolError as exc:
        log.warning("unexpected_status", status=exc.status_code)
"""

from aqua_client.errors.base import AquaError
from aqua_client.errors.client import ConfigError, InvalidArgumentError
from aqua_client.errors.decoding import DecodeError, FormatError
from aqua_client.errors.transport import ProtocolError, TransportError

__all__: list[str] = [
    "AquaError",
    "ConfigError",
    "DecodeError",
    "FormatError",
    "InvalidArgumentError",
    "ProtocolError",
    "TransportError",
]
