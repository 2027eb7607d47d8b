"""Publish analyzer results as GitHub pull request reviews and commit statuses."""
