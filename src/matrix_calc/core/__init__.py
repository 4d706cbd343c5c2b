"""
Core domain models and linear-algebra operations.

Everything here is pure: no I/O, no global state.
"""
