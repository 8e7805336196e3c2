"""Gateway service modules: provider request translation and response normalization."""
