"""
Per-resource API routers.
"""
