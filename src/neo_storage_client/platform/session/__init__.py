"""Session state: bearer token ownership, persistence and subject derivation."""
