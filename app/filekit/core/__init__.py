"""Core building blocks: errors, settings, storage backends, path resolution."""
