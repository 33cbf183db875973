"""Allow running as ``python -m fa``."""

from fa.cli import main

main()
