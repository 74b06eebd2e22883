"""Utility modules for the message board."""
