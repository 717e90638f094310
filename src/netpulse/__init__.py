"""
NetPulse - synthetic traffic capture and analysis pipeline.
"""

__version__ = "0.1.0"
