"""Core building blocks shared across realbrand-commons."""
