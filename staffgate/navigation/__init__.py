"""
Staffgate Navigation - Public API
=================================
"""

from staffgate.navigation.catalog import (
    InMemoryNavigationCatalog,
    NavigationCatalog,
    build_seed_items,
)
from staffgate.navigation.db_catalog import DbNavigationCatalog
from staffgate.navigation.filter import filter_navigation, unfiltered_navigation
from staffgate.navigation.models import NavigationItem, NavigationSubItem, SeedResult
from staffgate.navigation.paths import convert_path_to_staff

__all__ = [
    "NavigationItem",
    "NavigationSubItem",
    "SeedResult",
    "NavigationCatalog",
    "InMemoryNavigationCatalog",
    "DbNavigationCatalog",
    "build_seed_items",
    "convert_path_to_staff",
    "filter_navigation",
    "unfiltered_navigation",
]
