"""UI adapters built on top of the shadow runtime."""
