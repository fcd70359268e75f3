"""Configuration, logging, errors, persistence and security."""
