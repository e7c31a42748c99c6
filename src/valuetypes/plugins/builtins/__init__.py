"""Plugins shipped with valuetypes."""
