"""Export service facade and filesystem primitives."""
