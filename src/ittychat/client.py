# -*- test-case-name: ittychat.test.test_client -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Per-connection client state.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, Optional

from twisted.internet.interfaces import ITransport

WELCOME_BANNER = [
    "",
    "-" * 74,
    "Welcome to IttyChat!",
    "",
    "",
    "  To chat, type:              .connect <username>",
    "  To see who's online, type:  .who",
    "  To quit, type:              .quit",
    "-" * 74,
    "",
]


def _formatAddress(peer) -> str:
    host = getattr(peer, "host", None)
    port = getattr(peer, "port", None)
    if host is None or port is None:
        return str(peer)
    return f"{host}:{port}"


class Client:
    """
    A connected client: a transport plus some associated metadata.

    @ivar transport: The connection to the client.
    @ivar name: The client's display name, or L{None} until it has
        connected to the chat.
    @ivar isAuthenticated: C{True} once the client has claimed a name.
    @ivar connectedAt: POSIX timestamp of when the connection was made.
    @ivar address: The remote address of the client.
    """

    def __init__(
        self, transport: ITransport, clock: Callable[[], float] = time.time
    ) -> None:
        self.transport = transport
        self.name: Optional[str] = None
        self.isAuthenticated = False
        self.connectedAt = clock()
        self.address = _formatAddress(transport.getPeer())

    def notify(self, message: str) -> None:
        """
        Write a line to the client.
        """
        self.transport.write(message.encode("utf-8") + b"\r\n")

    def sendWelcome(self) -> None:
        """
        Write the welcome banner to the client.
        """
        for line in WELCOME_BANNER:
            self.notify(line)

    def disconnect(self) -> None:
        """
        Close the connection once pending output has been written.
        """
        self.transport.loseConnection()

    def __str__(self) -> str:
        connectedAt = datetime.fromtimestamp(self.connectedAt, timezone.utc)
        return "[name: {}, address: {}, connectedAt: {}]".format(
            self.name, self.address, connectedAt.isoformat()
        )

    def __repr__(self) -> str:
        return f"<Client {self.name!r} from {self.address}>"
