"""Business services used by the API layer."""
