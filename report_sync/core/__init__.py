"""
Core helpers shared by the report sync services.
"""
