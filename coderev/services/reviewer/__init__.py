"""Code review pipeline."""
