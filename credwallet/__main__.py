"""Entry point for `python -m credwallet`."""

import sys


def main():
    from credwallet.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
