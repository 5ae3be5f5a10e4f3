"""
Mentors Real Estate - Core Package

This package contains the backend for the Mentors lead-management tool,
including user accounts, developers, availability listings and customer leads.
"""

__version__ = "1.0.0"
