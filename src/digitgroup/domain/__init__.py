"""Domain layer: numeral grammar, grouping rules, and errors.

This layer depends only on stdlib and the frozen config model.
It must never import from api, output, commands, or the CLI, and never logs.
"""
