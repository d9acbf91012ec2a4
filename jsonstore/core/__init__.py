"""
Stateless helpers shared by the store: schema collaborators, default
storage locations and environment-driven configuration.
"""
