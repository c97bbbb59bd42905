"""Core building blocks shared by every client platform module."""
