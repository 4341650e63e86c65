"""
Database module - dados de demonstração em memória
"""
from .seed import seed_all, MASTER_USER_ID, DEMO_CLIENT_ID

__all__ = ["seed_all", "MASTER_USER_ID", "DEMO_CLIENT_ID"]
