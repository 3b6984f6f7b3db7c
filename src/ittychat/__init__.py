# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
ittychat: a (very!) simple line-oriented TCP chat server.

Clients connect with any line-mode terminal client, claim a display name
with C{.connect <name>} and then chat with every other connected, named
client.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
