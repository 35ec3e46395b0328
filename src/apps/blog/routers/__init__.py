"""Package initializer."""

