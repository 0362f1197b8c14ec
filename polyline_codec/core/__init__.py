"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Wire-format constants and precision limits
- exceptions: Custom exception hierarchy
"""
