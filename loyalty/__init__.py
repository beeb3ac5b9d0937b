"""
Portfolio loyalty level service.

Classifies a portfolio's total value into a loyalty tier and notifies
a downstream queue when the tier changes.
"""

__version__ = "0.1.0"
