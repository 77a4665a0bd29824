"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Location sources (CSV files, in-memory lists)
- The merged record store
- Search result caches (LRU, null)
"""
