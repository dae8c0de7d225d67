"""Companies module - tenant registration and profiles."""

from kangaroute.modules.companies.routes import router


# Module metadata
__module_info__ = {
    "name": "companies",
    "version": "1.0.0",
    "description": "Company (tenant) registration and profile management",
    "dependencies": [],
}

__all__ = ["router"]
