"""Shared infrastructure: exceptions, configuration, utilities."""
