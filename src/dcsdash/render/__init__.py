"""Presentation layer: pane text, rich layout, terminal session and render loop."""
