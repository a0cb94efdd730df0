"""Utility modules for common operations."""
