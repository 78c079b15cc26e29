"""liftlog: workout templates, session logging and AI-generated plans."""

__version__ = "0.1.0"
