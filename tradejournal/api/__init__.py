"""HTTP API for the trade journal."""
