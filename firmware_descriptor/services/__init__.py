"""Services wrapping the remote firmware API and recency tracking."""
