"""Use cases for Quill."""
