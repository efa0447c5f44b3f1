"""Pinhole camera that turns pixels into world-space rays."""
