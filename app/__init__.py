"""Hostel notifications service package."""
