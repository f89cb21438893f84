"""CLI layer — argument parsing, stream wiring, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and the top-level API, but no other layer may import from
``cli``.
"""
