# SPDX-License-Identifier: MIT

from codetodo.cleanup import register_cleanup
from codetodo.initialize import initialize
from codetodo.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
