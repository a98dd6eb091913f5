"""Session state and configuration for Dragon's Escape."""
