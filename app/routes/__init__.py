"""HTTP routes for the channel registry."""
