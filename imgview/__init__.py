"""
Image viewer core: action dispatch and external command execution.
"""

__version__ = "0.1.0"
