"""Core domain package for tertestrial.

Core contains trigger matching, templating, and the signal channel without
any filesystem, pipe, or process-specific code, keeping the logic portable.
"""
