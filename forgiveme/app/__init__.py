"""Application composition layer for the Tkinter GUI.

Controllers in this package wire views, view models, adapters, and use cases
into the runnable desktop flow without placing business logic in views.
"""
