"""Core truncation algorithms."""
