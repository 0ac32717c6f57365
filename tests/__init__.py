"""Tests for the mkfilep command; ``pythonpath`` in pyproject.toml puts ``src`` on the path."""
