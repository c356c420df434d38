"""
Receipt rendering.

Responsibilities:
- Turn a customer name and ordered thalis into a plain-text receipt.
"""
