"""Core infrastructure: settings, logging and database access."""
