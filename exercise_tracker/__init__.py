"""
Exercise tracker data-access layer.

Maps typed create/read/update requests for exercises, variants,
categories and descriptions onto a relational store.
"""

__version__ = "0.1.0"
