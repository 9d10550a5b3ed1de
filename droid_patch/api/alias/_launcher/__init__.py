""".cmd launcher alias installer (Windows)."""
