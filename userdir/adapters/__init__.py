"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations of ``UserSourcePort`` (HTTP and an
    offline mock) used by the ``FetchUsers`` use case.

Dependencies:
    HTTP submodules depend on ``requests`` and the domain port definitions.

Call context:
    Imported by ``userdir.web_ui.runtime`` for wiring and by tests for
    transport-level behavior verification.
"""
