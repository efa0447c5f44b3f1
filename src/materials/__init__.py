"""Materials, point lights, procedural patterns and Phong lighting."""
