"""Adapters connecting the core to the filesystem, signals, and processes."""
