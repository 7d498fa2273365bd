"""Application layer: state containers and services around the pure core."""
