"""
Record store implementations.
"""
