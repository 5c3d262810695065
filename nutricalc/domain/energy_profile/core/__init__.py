"""Core building blocks for the energy profile domain."""
