"""
Core domain models, integer arithmetic, and the matrix operation set.

This module contains the building blocks that are independent of the
interactive session: matrix models, the loader, the operation engine and
the snapshot contract.
"""
