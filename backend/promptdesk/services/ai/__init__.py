"""AI service modules."""
