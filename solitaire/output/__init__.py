"""
Solitaire Output Module
========================

Console display and report generation for Solitaire results.
"""

from solitaire.output.console import SolitaireConsoleOutput
from solitaire.output.report import SolitaireReportGenerator

__all__ = [
    "SolitaireConsoleOutput",
    "SolitaireReportGenerator",
]
