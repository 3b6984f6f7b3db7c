# -*- test-case-name: ittychat.test.test_registry,ittychat.test.test_commands -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Interfaces for the chat server.
"""

from zope.interface import Attribute, Interface


class IClientRegistry(Interface):
    """
    The set of all currently connected clients.
    """

    def add(client):
        """
        Add a client.  No duplicate detection is done beyond identity.

        @type client: L{ittychat.client.Client}
        """

    def remove(client):
        """
        Remove a client.  Removing a client which is not present does
        nothing.
        """

    def find(transport):
        """
        Find the client which owns the given transport.

        @return: the L{ittychat.client.Client}, or L{None} if no registered
            client owns C{transport}.
        """

    def nameInUse(name):
        """
        Is C{name} held by any registered client, ignoring case?

        @rtype: L{bool}
        """

    def authenticated():
        """
        Compute the clients which have claimed a name.  This is recomputed
        on every call.

        @rtype: L{list} of L{ittychat.client.Client}
        """

    def broadcastAll(message):
        """
        Deliver C{message} to every registered client.
        """

    def broadcastAuthenticated(message):
        """
        Deliver C{message} to every authenticated client.
        """

    def broadcastAuthenticatedExcept(excluded, message):
        """
        Deliver C{message} to every authenticated client except
        C{excluded}.
        """

    def count():
        """
        @return: the number of registered clients.
        @rtype: L{int}
        """


class ICommandRouter(Interface):
    """
    Something which interprets the input of a client.
    """

    registry = Attribute("The L{IClientRegistry} commands act on.")

    def dispatch(client, data):
        """
        Interpret one line of input from C{client}.

        @type client: L{ittychat.client.Client}
        @type data: L{bytes} or L{str}
        """
