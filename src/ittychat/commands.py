# -*- test-case-name: ittychat.test.test_commands -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Interpretation of client input.

Input is either a dot-command (C{.connect joe}, C{.who}, ...) or plain text,
which is treated as C{.say <text>}.  Command names may be abbreviated
(C{.c joe}) or carry trailing characters (C{.quitnow}); see
L{CommandRouter.resolve}.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Union

from zope.interface import implementer

from twisted.logger import Logger

from ittychat.client import Client
from ittychat.interfaces import IClientRegistry, ICommandRouter

COMMAND_RE = re.compile(r"^\.(\w*)\s*(.*)", re.ASCII | re.DOTALL)


@implementer(ICommandRouter)
class CommandRouter:
    """
    Dispatch lines of client input to the C{cmd_*} handlers.

    @cvar commands: Command keywords, in resolution order.
    """

    log = Logger()

    commands = ("quit", "connect", "nick", "who", "me", "say")

    def __init__(self, registry: IClientRegistry) -> None:
        self.registry = registry

    def dispatch(self, client: Client, data: Union[bytes, str]) -> None:
        if isinstance(data, bytes):
            data = data.decode("utf-8", "replace")
        rawInput = data.strip()
        if not rawInput:
            return

        self.log.info("[{address}]: {line}", address=client.address, line=rawInput)

        match = COMMAND_RE.match(rawInput)
        if match is None:
            self.cmd_say(client, rawInput)
            return

        command, arg = match.group(1), match.group(2).strip()
        handler = self.resolve(command)
        if handler is None:
            client.notify("Huh?")
        else:
            handler(client, arg)

    def resolve(self, command: str) -> Optional[Callable[[Client, str], None]]:
        """
        Find the handler for a typed command name.

        A name matches a keyword if it is an abbreviation of it (C{c},
        C{conn}) or begins with it (C{quitXYZ}).  Keywords are tried in the
        order of L{commands}.

        @return: the bound C{cmd_*} method, or L{None} if nothing matches.
        """
        if not command:
            return None
        for keyword in self.commands:
            if keyword.startswith(command) or command.startswith(keyword):
                return getattr(self, "cmd_" + keyword)
        return None

    def cmd_quit(self, client: Client, arg: str = "") -> None:
        # Cleanup happens when the connection is lost.
        client.disconnect()

    def cmd_connect(self, client: Client, name: str) -> None:
        if client.isAuthenticated:
            client.notify("You're already logged in! Type .quit to quit.")
        elif not name:
            client.notify("Please provide a valid name.")
        elif self.registry.nameInUse(name):
            client.notify("That name is already taken!")
        else:
            client.name = name
            client.isAuthenticated = True
            client.notify(f"Welcome to the chat, {name}!")
            self.registry.broadcastAuthenticatedExcept(client, f"{name} has joined.")

    def cmd_nick(self, client: Client, name: str) -> None:
        """
        Change the name of an authenticated client.

        A client may change the capitalization of its own name even though
        the name, ignoring case, is in use by that very client.
        """
        if not client.isAuthenticated:
            client.notify("Please log in (with .connect <username>) first.")
        elif not name:
            client.notify("Please provide a valid name.")
        elif client.name == name:
            client.notify("Uh... OK?")
        elif client.name.lower() != name.lower() and self.registry.nameInUse(name):
            client.notify("That name is already taken!")
        else:
            oldName, client.name = client.name, name
            client.notify(f"Changing user name to {name}")
            self.registry.broadcastAuthenticatedExcept(
                client, f"{oldName} is now known as {name}"
            )

    def cmd_who(self, client: Client, arg: str = "") -> None:
        authenticated = self.registry.authenticated()
        if not authenticated:
            client.notify("No one is connected.")
            return
        client.notify("The following users are connected:")
        for other in authenticated:
            client.notify("    " + other.name)

    def cmd_me(self, client: Client, text: str) -> None:
        if client.isAuthenticated:
            self.registry.broadcastAuthenticated(f"* {client.name} {text}")
        else:
            client.notify("You must be logged in to do that!")

    def cmd_say(self, client: Client, text: str) -> None:
        if client.isAuthenticated:
            self.registry.broadcastAuthenticated(f"[{client.name}]: {text}")
        else:
            client.notify("Please log in.")
