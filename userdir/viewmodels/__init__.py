"""ViewModel package for directory UI state and command surfaces.

Call context:
    ``userdir/web_ui/runtime.py`` imports concrete viewmodels from this package
    to bind page callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. I/O adapters and use-case orchestration remain outside.

Responsibilities:
    - Expose directory state and command intent callbacks.
    - Transform typed domain records into view-facing snapshots and labels.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
