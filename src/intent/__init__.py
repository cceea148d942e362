"""Command interpretation.

The intent layer converts an English or Hindi utterance into a strict `ParsedCommand`, which is then
dispatched to exactly one shopping-list action.
"""
