"""Resolver package for the GraphQL schema.

Resolvers read from the catalog store carried in the GraphQL context and
convert store records into the Strawberry types declared under ``types``.
"""
