"""Process runtime concerns."""
