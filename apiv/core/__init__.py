"""Core configuration and logging for the apiv package."""
