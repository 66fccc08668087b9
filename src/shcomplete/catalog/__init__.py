"""Command catalog, option descriptors and value sources."""
