"""Allow ``python -m rkv``."""

from rkv.cli import cli

if __name__ == "__main__":
    cli()
