"""
Device API - serverless endpoint that validates and stores devices.
"""

__version__ = "1.0.0"
