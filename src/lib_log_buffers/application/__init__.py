"""Application layer: ports and use cases of the buffered logging engine."""
