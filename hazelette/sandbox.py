"""Sample application and the command that starts it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from hazelette import log
from hazelette.application import Application


class Sandbox(Application):
    """The demo application built on the engine."""


def create_application() -> Application:
    """Build the application the command runs."""
    return Sandbox()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up logging, then run the sandbox until its window is closed."""
    parser = argparse.ArgumentParser(prog="hazelette", description="Run the sandbox application.")
    parser.parse_args(argv)

    log.init()
    log.core_logger().warning("Initialized Log")
    value = 5
    log.client_logger().info("Hello! Var=%s", value)

    app = create_application()
    try:
        app.run()
    finally:
        app.window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())