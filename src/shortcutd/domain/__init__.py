"""Domain layer — commands, rules, and the rule table.

This layer depends only on stdlib and pydantic.
It must never import from services, web, commands, or config.
"""
