"""
Solitaire Module Entry Point
=============================

Allows running the Solitaire CLI via: python -m solitaire
"""

from solitaire.cli import main

if __name__ == "__main__":
    main()
