"""Core configuration and shared resources."""
