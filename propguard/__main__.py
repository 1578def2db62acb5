"""Entry-point for ``python -m propguard``."""

from propguard.main import main

main()
