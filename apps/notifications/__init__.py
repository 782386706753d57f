"""In-app notifications addressed to a single user."""
