"""Infrastructure layer - logging, database and adapter implementations."""
