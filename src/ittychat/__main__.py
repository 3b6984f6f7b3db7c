# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Run the chat server with C{python -m ittychat}.
"""

import sys

from ittychat.scripts.ittychat import run

if __name__ == "__main__":
    sys.exit(run())
