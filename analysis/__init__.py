"""Delivery analysis entry points."""
