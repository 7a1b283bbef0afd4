"""HTTP API serving site content as JSON."""
