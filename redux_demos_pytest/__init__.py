"""Pytest fixtures for testing the demo stores."""
