# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Helpers for the chat server tests.
"""

from twisted.internet.address import IPv4Address
from twisted.internet.testing import StringTransport

from ittychat.client import Client

_nextPort = [40000]


def makeTransport(host="10.0.0.1"):
    """
    Make a L{StringTransport} with a distinct peer address.
    """
    _nextPort[0] += 1
    return StringTransport(peerAddress=IPv4Address("TCP", host, _nextPort[0]))


def makeClient(name=None, host="10.0.0.1"):
    """
    Make a L{Client} on a fresh L{StringTransport}, optionally already
    authenticated as C{name}.
    """
    client = Client(makeTransport(host))
    if name is not None:
        client.name = name
        client.isAuthenticated = True
    return client


def linesWritten(client):
    """
    Return the lines written to C{client} so far and clear its transport.
    """
    data = client.transport.value()
    client.transport.clear()
    return data.decode("utf-8").split("\r\n")[:-1]
