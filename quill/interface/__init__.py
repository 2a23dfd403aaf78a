"""Interface layer for Quill."""
