"""Infrastructure: blob storage and in-memory persistence."""
