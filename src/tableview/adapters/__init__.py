"""Adapters – concrete integrations with remote collection sources."""
