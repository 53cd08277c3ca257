"""Core infrastructure: settings, logging and the user data store."""
