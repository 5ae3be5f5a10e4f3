"""
Shared helpers: logging, input validation and display formatting.
"""
