"""Core domain logic for catalog reconciliation."""
