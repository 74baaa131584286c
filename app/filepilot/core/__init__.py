"""Core infrastructure: configuration, XDG paths and console theme."""
