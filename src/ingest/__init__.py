"""Vocabulary import pipeline.

This package reads CSV and JSON import files, resolves column aliases,
and validates rows into vocabulary entries for the store layer.
"""
