"""Allow ``python -m campaigen``."""

from .cli.main import main

if __name__ == "__main__":
    main(prog_name="campaigen")
