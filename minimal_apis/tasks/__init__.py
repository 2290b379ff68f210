"""
Task list service.
"""
