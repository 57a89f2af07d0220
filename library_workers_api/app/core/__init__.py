"""Configuration, logging, error handling and database access."""
