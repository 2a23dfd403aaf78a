"""Application layer for Quill."""
