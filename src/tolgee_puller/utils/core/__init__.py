"""Core utilities: exceptions, console reporting and version lookup."""
