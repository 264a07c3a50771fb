"""Core building blocks of the context layer.

Subpackages:
    - ``registry``: model family classification and context-window table
    - ``tokens``: heuristic token counters and the cached factory
    - ``context``: budget calculation and conversation pruning
    - ``truncation``: strategy-driven text truncation

``errors``, ``models`` and ``logging`` are facade modules over the
one-class-per-file ``*_parts`` packages.
"""
