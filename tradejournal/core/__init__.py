"""Shared infrastructure: configuration, logging, constants, error logging."""
