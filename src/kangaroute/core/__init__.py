"""Core services and cross-cutting concerns.

Submodules are imported explicitly (``kangaroute.core.errors``,
``kangaroute.core.database``...) so that ``kangaroute.config`` can depend
on ``kangaroute.core.constants`` without an import cycle.
"""
