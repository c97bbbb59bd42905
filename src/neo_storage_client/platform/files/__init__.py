"""File collection paging, upload and row actions."""
