"""Helper utilities for console output and filesystem copies."""
