"""OAuth infrastructure."""
