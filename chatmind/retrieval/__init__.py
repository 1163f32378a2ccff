"""Retrieval package.

Provides the static `knowledge_base` catalog, concept graph, comparison tables and
learning paths queried by the response generator.
"""
