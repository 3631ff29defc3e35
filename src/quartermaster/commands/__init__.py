"""Click commands for the quartermaster CLI."""
