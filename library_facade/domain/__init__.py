"""
Domain logic module for business rules.

This package contains the library facade, which holds the core business
rules and is independent of how data is stored or messages are delivered.
"""
