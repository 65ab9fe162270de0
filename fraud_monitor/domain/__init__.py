"""Domain models and the fraud scoring engine."""
