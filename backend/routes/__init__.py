"""
OPS-DESK Routes Package
API route blueprints.
"""

from routes.health import health_bp
from routes.amounts import amounts_bp
from routes.imports import imports_bp
from routes.inventory import inventory_bp

__all__ = ['health_bp', 'amounts_bp', 'imports_bp', 'inventory_bp']
