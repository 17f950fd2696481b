"""Revision hash identifiers."""

from __future__ import annotations

from aqua_client.errors import FormatError


class RevisionHash(str):
    """Opaque hex-string identifier of a single revision.

    Behaves exactly like ``str``; ``to_bytes`` exposes the binary digest
    for consumers that recompute or compare hashes.
    """

    __slots__ = ()

    def to_bytes(self) -> bytes:
        """Decode the hex representation into raw bytes.

        Raises:
            FormatError: If the hash is not valid hexadecimal.
        """
        try:
            return bytes.fromhex(self)
        except ValueError as exc:
            raise FormatError(str(self), "revision hash is not valid hex") from exc
