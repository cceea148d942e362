"""Command dispatch.

A validated `ParsedCommand` is turned into exactly one call against the shopping collaborators.
"""
