# src/xconvert/__main__.py
"""Module entry point: ``python -m xconvert``."""

from xconvert.app import main

if __name__ == "__main__":
    main()
