"""Observability – logging configuration and redaction."""
