"""SVG loading and scene building."""
