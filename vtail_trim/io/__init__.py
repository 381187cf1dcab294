"""
Configuration and data file I/O.
"""
