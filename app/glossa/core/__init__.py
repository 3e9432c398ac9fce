"""Core settings and logging for glossa."""
