"""Version 1 of the REST helper routes."""
