"""Pixel buffers and the parallel render loop."""
