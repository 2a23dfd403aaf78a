"""Persistence layer for Quill."""
