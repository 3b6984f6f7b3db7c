# -*- test-case-name: ittychat.test.test_script -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Run the chat server in the foreground, logging to standard output.

Usage: ittychat [-l] <port>
"""

import sys

from twisted.internet.error import CannotListenError
from twisted.logger import Logger, globalLogBeginner, textFileLogObserver
from twisted.python import usage

from ittychat.tap import Options, makeService

log = Logger()


def run(argv=None, reactor=None, stdout=None):
    """
    Parse C{argv}, listen and run the reactor until it is stopped (by
    SIGINT, for example).

    @return: the process exit status.
    """
    if stdout is None:
        stdout = sys.stdout

    config = Options()
    try:
        config.parseOptions(argv)
    except usage.UsageError as e:
        print(f"ittychat: {e}", file=stdout)
        print(config, file=stdout)
        return 1

    if reactor is None:
        from twisted.internet import reactor

    service = makeService(config, reactor)
    try:
        service.startService()
    except CannotListenError as e:
        print(f"ittychat: {e}", file=stdout)
        return 1

    globalLogBeginner.beginLoggingTo([textFileLogObserver(stdout)])
    reactor.addSystemEventTrigger("before", "shutdown", service.factory.shutdown)
    reactor.addSystemEventTrigger("before", "shutdown", service.stopService)
    log.info("Now listening on port {port}", port=config["port"])
    reactor.run()
    return 0


if __name__ == "__main__":
    sys.exit(run())
