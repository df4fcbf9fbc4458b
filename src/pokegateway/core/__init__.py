"""Cross-cutting infrastructure: logging and the exception hierarchy."""
