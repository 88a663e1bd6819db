"""Document hub: document upload, search, approval and dashboard API."""
