"""PromptDesk desktop backend."""
