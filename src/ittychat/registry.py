# -*- test-case-name: ittychat.test.test_registry -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
The registry of connected clients.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from zope.interface import implementer

from ittychat.client import Client
from ittychat.interfaces import IClientRegistry


@implementer(IClientRegistry)
class ClientRegistry:
    """
    All currently connected clients, in the order they connected.

    Broadcasts write to each client in turn.  Transport writes are buffered,
    so a slow client does not hold up delivery to the others.
    """

    def __init__(self) -> None:
        self._clients: List[Client] = []

    def add(self, client: Client) -> None:
        self._clients.append(client)

    def remove(self, client: Client) -> None:
        try:
            self._clients.remove(client)
        except ValueError:
            pass

    def find(self, transport) -> Optional[Client]:
        for client in self._clients:
            if client.transport is transport:
                return client
        return None

    def nameInUse(self, name: str) -> bool:
        """
        Check every registered client, authenticated or not, for a name
        equal to C{name} ignoring case.
        """
        if name is None:
            return False
        folded = name.lower()
        return any(
            client.name is not None and client.name.lower() == folded
            for client in self._clients
        )

    def authenticated(self) -> List[Client]:
        return [client for client in self._clients if client.isAuthenticated]

    def broadcastAll(self, message: str) -> None:
        for client in list(self._clients):
            client.notify(message)

    def broadcastAuthenticated(self, message: str) -> None:
        for client in self.authenticated():
            client.notify(message)

    def broadcastAuthenticatedExcept(self, excluded: Client, message: str) -> None:
        for client in self.authenticated():
            if client is not excluded:
                client.notify(message)

    def count(self) -> int:
        return len(self._clients)

    def __len__(self) -> int:
        return len(self._clients)

    def __iter__(self) -> Iterator[Client]:
        return iter(list(self._clients))

    def __contains__(self, client: object) -> bool:
        return any(c is client for c in self._clients)
