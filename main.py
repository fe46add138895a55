"""CLI entrypoint for the word puzzle terminal host."""

import sys

from wordmaker.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
