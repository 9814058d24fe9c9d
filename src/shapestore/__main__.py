"""Entry point: python -m shapestore"""

import sys

from shapestore.config import configure_logging
from shapestore.console import ConsoleLoop
from shapestore.store import FigureStore


def main() -> int:
    configure_logging()
    store = FigureStore()
    return ConsoleLoop(store).run()


if __name__ == "__main__":
    sys.exit(main())
