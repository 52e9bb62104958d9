"""Vocabulary export.

This module renders vocabulary entries as CSV or JSON files for
template downloads and word list exports.
"""
