import logging
import sys

from greeter.server import GreeterServer
from greeter.users import print_users

logger = logging.getLogger("greeter")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    print_users()
    result = GreeterServer().start()
    if not result.ok:
        logger.error("%s", result.error)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
