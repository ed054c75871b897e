"""Multilingual FAQ service: cache-aside reads, auto-translated writes."""
