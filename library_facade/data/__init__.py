"""
Entities and the persistence interface.
"""
