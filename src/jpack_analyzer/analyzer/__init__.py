"""Artifact classification and jdeps aggregation."""
