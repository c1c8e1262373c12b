"""HTTP interface for graph generation."""
