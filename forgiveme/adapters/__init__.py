"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem, webhook
    HTTP, and in-memory test doubles).

Dependencies:
    Individual submodules depend on ``requests``, filesystem APIs, and domain
    protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
