"""
Main entry point for benchdiff

This allows running the CLI with: python -m benchdiff
"""
from .cli import main

if __name__ == "__main__":
    main()
