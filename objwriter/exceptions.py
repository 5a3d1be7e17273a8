#!/usr/bin/env python3
"""
objwriter Exceptions

This module defines custom exceptions used throughout the objwriter library.
"""

class ObjWriterException(Exception):
    """Base class for all objwriter exceptions."""
    pass

class ObjDestinationError(ObjWriterException):
    """Exception raised when the output destination cannot be opened for writing."""
    pass

class SceneError(ObjWriterException):
    """Exception raised when a scene document cannot be read or decoded."""
    pass
