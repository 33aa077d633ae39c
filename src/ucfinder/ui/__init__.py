"""User-facing front-ends for ucfinder."""
