"""Resolve the text content of entries stored inside package archives."""
