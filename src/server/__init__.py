"""HTTP API for docmark."""
