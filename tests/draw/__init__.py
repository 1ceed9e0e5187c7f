"""Tests for the painting of boxes by the PDF host."""
