"""Utility helpers for alienv."""
