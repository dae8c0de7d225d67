"""Slots module - cargo places inside vehicles."""

from kangaroute.modules.slots.routes import router


# Module metadata
__module_info__ = {
    "name": "slots",
    "version": "1.0.0",
    "description": "Slot management for a tenant's vehicles",
    "dependencies": ["vehicles"],
}

__all__ = ["router"]
