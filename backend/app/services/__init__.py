"""Services Layer: request-to-storage translation, one storage call per operation."""
