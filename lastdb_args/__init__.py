"""
lastdb_args

Command line option handling for lastdb: turns an argument vector into a
validated, fully defaulted configuration plus the database output name and
the position where the sequence file list begins.
"""

__version__ = "1.0.0"
