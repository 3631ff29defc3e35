"""Core quartermaster operations."""
