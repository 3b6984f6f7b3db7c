# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Tests for L{ittychat.scripts.ittychat}.
"""

from io import StringIO

from twisted.internet.error import CannotListenError
from twisted.internet.testing import MemoryReactor
from twisted.trial.unittest import TestCase

from ittychat.scripts import ittychat


class RefusingReactor(MemoryReactor):
    def listenTCP(self, port, factory, backlog=50, interface=""):
        raise CannotListenError(interface, port, OSError("in use"))


class FakeLogBeginner:
    def __init__(self):
        self.observers = None

    def beginLoggingTo(self, observers):
        self.observers = observers


class RunTests(TestCase):
    """
    Tests for L{ittychat.run}.
    """

    def setUp(self):
        self.stdout = StringIO()
        self.beginner = FakeLogBeginner()
        self.patch(ittychat, "globalLogBeginner", self.beginner)

    def test_usageError(self):
        """
        Bad arguments print the error and usage to stdout and give exit
        status 1 without listening.
        """
        reactor = MemoryReactor()
        status = ittychat.run(["80"], reactor, self.stdout)
        self.assertEqual(status, 1)
        output = self.stdout.getvalue()
        self.assertIn("Port number must be > 1024", output)
        self.assertIn("[-l] <port>", output)
        self.assertEqual(reactor.tcpServers, [])
        self.assertIsNone(self.beginner.observers)

    def test_wrongArgumentCount(self):
        """
        Running without a port is a usage error.
        """
        status = ittychat.run([], MemoryReactor(), self.stdout)
        self.assertEqual(status, 1)
        self.assertIn("Wrong number of arguments.", self.stdout.getvalue())

    def test_portOutOfRange(self):
        """
        A port too large to listen on is a usage error, reported on stdout
        with exit status 1.
        """
        reactor = MemoryReactor()
        status = ittychat.run(["70000"], reactor, self.stdout)
        self.assertEqual(status, 1)
        self.assertIn("Port number must be <= 65535", self.stdout.getvalue())
        self.assertEqual(reactor.tcpServers, [])

    def test_run(self):
        """
        A good configuration listens, starts logging, arranges for the
        shutdown notice and runs the reactor.
        """
        reactor = MemoryReactor()
        status = ittychat.run(["4000"], reactor, self.stdout)
        self.assertEqual(status, 0)
        [(port, factory, backlog, interface)] = reactor.tcpServers
        self.assertEqual((port, interface), (4000, ""))
        self.assertEqual(len(self.beginner.observers), 1)
        triggers = [f for f, args, kw in reactor.triggers["before"]["shutdown"]]
        self.assertIn(factory.shutdown, triggers)

    def test_cannotListen(self):
        """
        If the port cannot be listened on, the error is printed and the exit
        status is 1.
        """
        reactor = RefusingReactor()
        status = ittychat.run(["4000"], reactor, self.stdout)
        self.assertEqual(status, 1)
        self.assertIn("Couldn't listen on", self.stdout.getvalue())
        self.assertEqual(reactor.triggers, {})
