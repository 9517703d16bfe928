"""Pure computations: goal coverage and weekly balance."""
