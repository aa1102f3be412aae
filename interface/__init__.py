"""Outer surfaces: REST API and terminal driver."""
