"""Allows invoking the CLI via: python -m pattern_catalog"""

from pattern_catalog.cli.main import main

if __name__ == "__main__":
    main()
