"""ViewModel package for UI state and command surfaces.

Call context:
    ``forgiveme/app/main.py`` and ``forgiveme/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. Storage, HTTP and
    use-case wiring stay in the composition layer.

Responsibilities:
    - Expose mutable UI state and command intent callbacks.
    - Format domain records into view-facing rows.
"""
