"""Vehicle state machine with a chainable command interface."""

__version__ = "1.0.0"
