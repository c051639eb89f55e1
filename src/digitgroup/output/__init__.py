"""Output layer: result payloads and their human/JSON rendering."""
