"""Command-line runtime for compiling and rendering patterns."""
