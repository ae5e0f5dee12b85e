"""Dialog topics, greetings and step-based quest progression for role-playing games."""

__version__ = "0.1.0"