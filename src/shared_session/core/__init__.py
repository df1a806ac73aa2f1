"""Core building blocks shared across shared-session features."""
