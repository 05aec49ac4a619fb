"""Core: domain, services, configuration and logging."""
