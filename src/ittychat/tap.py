# -*- test-case-name: ittychat.test.test_tap -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Command line options for the chat server and construction of its service.
"""

from twisted.application import internet
from twisted.python import usage

from ittychat.protocol import ChatFactory

LOOPBACK = "127.0.0.1"
MINIMUM_PORT = 1025
MAXIMUM_PORT = 65535


class Options(usage.Options):
    """
    Options for the chat server.

    The single positional argument is the TCP port to listen on, which must
    be greater than 1024.  C{-l} may appear before or after it.
    """

    synopsis = "Usage: ittychat [-l] <port>"
    longdesc = "A (very!) simple line-oriented chat server."

    optFlags = [
        ["local", "l", "Listen on the loopback interface only."],
    ]

    def parseArgs(self, *args):
        args = list(args)
        while "-l" in args:
            args.remove("-l")
            self["local"] = True
        if len(args) != 1:
            raise usage.UsageError("Wrong number of arguments.")
        self["port"] = args[0]

    def postOptions(self):
        try:
            port = int(self["port"])
        except ValueError:
            raise usage.UsageError(f"Invalid port number: {self['port']!r}")
        if port < MINIMUM_PORT:
            raise usage.UsageError("Port number must be > 1024")
        if port > MAXIMUM_PORT:
            raise usage.UsageError(f"Port number must be <= {MAXIMUM_PORT}")
        self["port"] = port

    def interface(self):
        """
        @return: the address to bind to; the empty string means every
            interface.
        """
        if self["local"]:
            return LOOPBACK
        return ""


def makeService(config, reactor=None):
    """
    Construct a TCP server for the chat.  The L{ChatFactory} is available as
    the C{factory} attribute of the returned service.

    @param reactor: The reactor to listen with, or L{None} for the global
        one.
    """
    factory = ChatFactory()
    service = internet.TCPServer(
        config["port"], factory, interface=config.interface(), reactor=reactor
    )
    service.factory = factory
    return service
