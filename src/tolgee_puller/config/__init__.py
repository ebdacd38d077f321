"""Options schema, environment settings and options building."""
