"""State layer.

This package is the single source of truth for the dashboard: bounded
chart histories, the pane navigation machine, and the snapshot hub
that both producers publish into.
"""
