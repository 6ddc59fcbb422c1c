"""
LedgerLite - Source Package

A console expense tracker for a single local user. Expenses live in
one flat text file that is fully rewritten on every change.

DESIGN PRINCIPLES:
1. Every operation starts from a fresh load of the file
2. Validation reports problems, it never silently corrects them
3. Storage layer is swappable (file on disk, in-memory for tests)
4. Every mutation is audited
"""

__version__ = "1.0.0"
__author__ = "LedgerLite Team"
