"""Demo web host."""
