"""Fraud Transaction Monitoring Service.

This service provides APIs to:
- Record transactions and score them for fraud at creation time
- List transactions, optionally filtered by user or suspicious flag
- Review suspicious transactions and manually flag them
- Summarise a user's transaction activity
- Run the fraud scoring engine on demand
"""

__version__ = "0.1.0"
