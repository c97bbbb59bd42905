"""Lifecycle of client-held binary object handles (thumbnails and preview)."""
