"""Outbound request dispatch and session-expiry handling."""
