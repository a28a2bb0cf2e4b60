"""Evaluation backends for dataset runs."""
