"""Textual renderer for rich fields: widgets, the demo form, and its app."""
