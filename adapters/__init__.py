"""Linkman adapters: concrete implementations of linkman.protocols."""
