"""Recommendation passes, discovered automatically by PassRegistry."""
