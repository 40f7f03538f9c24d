"""Command line interface for hourglasspass."""
