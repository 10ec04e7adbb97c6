"""
API Routers - Organized endpoint handlers for the NamAstra API.

Each router handles a specific domain:
- search: Search, Parse & Search, Compute & Search, raw wish parsing
- names: Name detail and comparison
"""
