"""
owner_registry.api.routers

HTTP routers (health probes, owner CRUD).
"""
