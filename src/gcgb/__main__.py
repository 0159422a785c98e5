"""Allow ``python -m gcgb``."""

from gcgb.cli import main

main()
