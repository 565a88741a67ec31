"""
Configuration and logging setup.
"""
