"""Output layer — render ServiceResults and graph listings for the terminal."""
