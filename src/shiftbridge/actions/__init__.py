"""Agent-invocable actions.

Provides the action protocol, the name-keyed registry, the editor
mutation facade, and the built-in actions that edit requests and manage
filters, scopes, environments, learnings and replay sessions.
"""
