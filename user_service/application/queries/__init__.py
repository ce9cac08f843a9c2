"""Read operations."""
