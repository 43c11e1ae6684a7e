"""postmore API - filter, commands and configuration."""
