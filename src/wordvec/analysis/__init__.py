"""
Embedding Operations
====================
Numeric operations over a loaded vector table.

Note: This package should be pure Python/NumPy (plus numba kernels).
"""
