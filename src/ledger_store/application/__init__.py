"""Application layer: ports, use cases and the store call surface."""
