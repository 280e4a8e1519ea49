"""Command-line interface for vsort."""
