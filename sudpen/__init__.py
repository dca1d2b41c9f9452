"""
Sudpen booking - slot availability for a single-location service desk.
"""

__version__ = "0.1.0"
