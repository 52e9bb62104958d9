"""Word storage layer.

This package persists owner-scoped vocabulary as JSONL files.
It backs listing, deletion, and export for the SDK client.
"""
