"""Allow running as `python -m alienv`."""

from .cli import main

main()
