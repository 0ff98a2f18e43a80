"""Use-case layer for orchestrating the response flow.

Each module coordinates domain objects and ports without performing I/O
directly, preserving MVVM + Hexagonal boundaries.
"""
