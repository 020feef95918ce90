"""Find Flutter projects and reclaim the space held by their build artifacts."""

__version__ = "0.1.0"
