"""AI code review: prompts, providers, response parsing and metrics."""
