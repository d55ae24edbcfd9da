"""ViewModel package for UI state and snapshot publishing.

Call context:
    ``foodscreen/app/main.py`` imports concrete viewmodels from this package to
    bind view callbacks to data-source notifications.

Dependencies:
    Modules in this package depend on domain types and the data-source port
    only. Tk widgets and timers remain outside.

Responsibilities:
    - Rebuild immutable snapshots whenever the data source reloads.
    - Forward cell lookups so views never address sections directly.
"""
