"""Service layer: domain operations wrapped in ServiceResult.

Services may import from domain and config layers.
They must never import from commands or output.
"""
