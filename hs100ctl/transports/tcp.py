"""TCP transport implementation using Python sockets."""

from __future__ import annotations

import base64
import logging
import socket

from hs100ctl.core.errors import TransportConnectError
from hs100ctl.core.model import split_address

READ_BUFFER_SIZE = 1024
LOGGER = logging.getLogger(__name__)


class TCPTransport:
    """One connect/write/read/close cycle per call.

    The reply is read once into a fixed buffer; larger replies are truncated.
    """

    def send(
        self,
        address: str,
        payload: bytes,
        *,
        timeout_s: float | None = None,
    ) -> bytes:
        try:
            endpoint = split_address(address)
        except ValueError as exc:
            raise TransportConnectError(str(exc)) from exc

        try:
            if timeout_s is None:
                tcp_socket = socket.create_connection(endpoint)
            else:
                tcp_socket = socket.create_connection(endpoint, timeout=timeout_s)
        except OSError as exc:
            raise TransportConnectError(f"Cannot connect to plug at {address}: {exc}") from exc

        buffer = bytearray(READ_BUFFER_SIZE)
        received = 0
        try:
            try:
                tcp_socket.sendall(payload)
            except OSError as exc:
                LOGGER.warning("Cannot write request to plug at %s: %s", address, exc)

            try:
                received = tcp_socket.recv_into(buffer)
            except OSError as exc:
                LOGGER.warning("Cannot read data from plug at %s: %s", address, exc)
        finally:
            tcp_socket.close()

        reply = bytes(buffer[:received])
        LOGGER.debug("Reply from %s: %s", address, base64.b64encode(reply).decode("ascii"))
        return reply
