"""
LSP connector fragments — configuration fragments for editor clients.
"""

__version__ = "0.1.0"
