"""Version information for shared-session."""

__version__ = "0.1.0"
