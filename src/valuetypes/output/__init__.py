"""Output layer — Rich/JSON rendering of results and type catalogs."""
