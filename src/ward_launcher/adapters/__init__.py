"""Adapters touching the filesystem and the operating system."""
