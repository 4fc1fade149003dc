"""Tests for CanvaStyle."""
