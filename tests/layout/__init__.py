"""Tests for the layout of boxes."""
