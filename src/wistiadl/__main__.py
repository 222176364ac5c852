"""Allow ``python -m wistiadl`` invocation."""

from .cli import run

if __name__ == "__main__":
    run()
