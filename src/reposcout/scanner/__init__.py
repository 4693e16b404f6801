"""Scan simulation engine — parser, generator, session and risk classifier."""
