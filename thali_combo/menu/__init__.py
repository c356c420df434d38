"""
Thali menu package.

Responsibilities:
- Define the thali record shape and the partial views other packages read.
- Validate caller-supplied values into those models without raising.
- Describe a single thali and search a menu by name or dish.
"""
