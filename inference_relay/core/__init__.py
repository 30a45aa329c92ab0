"""
Core domain logic.

Input sanitization, citation resolution and the exception hierarchy.
"""
