"""Vehicles module - a company's fleet."""

from kangaroute.modules.vehicles.routes import router


# Module metadata
__module_info__ = {
    "name": "vehicles",
    "version": "1.0.0",
    "description": "Tenant-scoped vehicle management",
    "dependencies": ["companies"],
}

__all__ = ["router"]
