"""Application layer: invocation construction and adapter ports."""
