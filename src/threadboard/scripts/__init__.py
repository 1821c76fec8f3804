"""Operational scripts for the Threadboard database."""
