"""
Core domain models, numerical primitives and error taxonomy.

All building blocks are pure value objects and functions with no I/O
and no shared mutable state.
"""
