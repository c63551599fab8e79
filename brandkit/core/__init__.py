"""Core configuration, database, logging and authentication."""
