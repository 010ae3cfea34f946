"""Core infrastructure: settings, logging and the submission store."""
