"""Support utilities for hourglasspass."""
