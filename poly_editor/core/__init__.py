"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants for the text format and map defaults
- exceptions: Custom exception hierarchy
"""
