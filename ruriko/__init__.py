"""Approval decision parsing, audit room notices and chat command helpers."""

__version__ = "0.1.0"