"""pytest integration for shadowed host classes."""
