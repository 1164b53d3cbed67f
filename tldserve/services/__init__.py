"""Host resolution and page rendering services."""
