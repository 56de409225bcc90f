"""Command-line interface for dirbundle."""
