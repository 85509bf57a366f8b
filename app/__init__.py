"""Event Management API backend."""
