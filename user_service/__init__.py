"""User management microservice: CRUD over user records with event notifications."""

__version__ = "1.0.0"
