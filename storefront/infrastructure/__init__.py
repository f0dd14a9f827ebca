"""Infrastructure Layer — logging setup and other process-level plumbing."""
