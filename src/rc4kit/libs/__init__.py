"""
Self-contained building blocks with no dependency on configuration or I/O.
"""
