"""Write operations."""
