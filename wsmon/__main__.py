"""Allow running wsmon with `python -m wsmon`."""

from .command import main

main()
