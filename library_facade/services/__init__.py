"""
Interfaces for the external services the library depends on.
"""
