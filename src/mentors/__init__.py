"""
Mentors lead-management backend.
"""
