"""Infrastructure shared by every bounded context."""
