"""Developer command-line entry points."""
