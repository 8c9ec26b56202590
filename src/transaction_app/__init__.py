"""In-memory transaction records service."""
