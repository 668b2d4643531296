"""Key-value storage backends, review history and preferences."""
