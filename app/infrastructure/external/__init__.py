"""External services (blob storage)."""
