# -*- test-case-name: ittychat.test.test_protocol -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
The chat server protocol and its factory.
"""

from __future__ import annotations

from typing import Optional

from twisted.internet import protocol
from twisted.logger import Logger
from twisted.protocols import basic
from twisted.python.failure import Failure

from ittychat.client import Client
from ittychat.commands import CommandRouter
from ittychat.registry import ClientRegistry


class ChatProtocol(basic.LineOnlyReceiver):
    """
    One client connection.  Each newline-terminated line is handed to the
    factory's command router.

    @ivar client: The L{Client} for this connection, set once the connection
        is made.
    """

    delimiter = b"\n"

    factory: ChatFactory
    client: Optional[Client] = None

    def connectionMade(self) -> None:
        self.client = self.factory.clientConnected(self.transport)

    def lineReceived(self, line: bytes) -> None:
        self.factory.router.dispatch(self.client, line)

    def connectionLost(self, reason: Failure = protocol.connectionDone) -> None:
        self.factory.clientDisconnected(self.transport)


class ChatFactory(protocol.ServerFactory):
    """
    Builds L{ChatProtocol}s which share one L{ClientRegistry} and one
    L{CommandRouter}.
    """

    protocol = ChatProtocol
    log = Logger()

    def __init__(
        self,
        registry: Optional[ClientRegistry] = None,
        router: Optional[CommandRouter] = None,
    ) -> None:
        if registry is None:
            registry = ClientRegistry()
        if router is None:
            router = CommandRouter(registry)
        self.registry = registry
        self.router = router

    def clientConnected(self, transport) -> Client:
        """
        Register a new connection and greet it.

        @return: the new L{Client}.
        """
        client = Client(transport)
        self.registry.add(client)
        client.sendWelcome()
        self.log.info(
            "Connection from {client} (clients: {count})",
            client=client,
            count=self.registry.count(),
        )
        return client

    def clientDisconnected(self, transport) -> None:
        """
        Forget the client owning C{transport} and tell the others it left.
        Nothing happens if no registered client owns it.
        """
        client = self.registry.find(transport)
        if client is None:
            return
        self.log.info("Disconnect from {client}", client=client)
        if client.isAuthenticated:
            self.registry.broadcastAuthenticatedExcept(
                client, f"{client.name} has left the chat"
            )
        self.registry.remove(client)
        self.log.info(
            "Disconnect from {address}. (clients: {count})",
            address=client.address,
            count=self.registry.count(),
        )

    def shutdown(self) -> None:
        """
        Tell every connected client, named or not, that the server is going
        away.
        """
        self.log.info("Cleaning up...")
        self.registry.broadcastAll("System going down RIGHT NOW!")
        self.log.info("Bye!")
