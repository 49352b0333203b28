"""Route classification for self-describing, multi-tenant API paths."""
