"""Command-line solving and result reporting."""
