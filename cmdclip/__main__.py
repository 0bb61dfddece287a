"""Allow ``python -m cmdclip``."""

from .cli import main

main()
