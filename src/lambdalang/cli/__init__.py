"""
lambdalang Command-Line Interface
=================================

- **lamlex**: dump the tokens of a source file

Implemented as a Click-based CLI application.
"""

__all__ = ["lamlex"]
