"""Adapters driving the ledger store from outside."""
