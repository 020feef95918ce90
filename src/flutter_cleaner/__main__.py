"""Allow running as ``python -m flutter_cleaner``."""

from flutter_cleaner.cli import main

main()
