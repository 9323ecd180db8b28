"""Catalog functionality: actions, resources, builders and JSON loading."""

from orchestrate.core.catalog.builder import ActionBuilder, CatalogBuilder
from orchestrate.core.catalog.loader import catalog_from_dict, catalog_to_dict, load_catalog
from orchestrate.core.catalog.models import Action, Catalog, CatalogError

__all__ = [
    "Action",
    "Catalog",
    "CatalogError",
    "ActionBuilder",
    "CatalogBuilder",
    "catalog_from_dict",
    "catalog_to_dict",
    "load_catalog",
]
