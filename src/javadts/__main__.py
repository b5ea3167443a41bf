"""Allow ``python -m javadts``."""

from javadts.cli.main import cli

if __name__ == "__main__":
    cli()
