from roadrisk.services.zones.catalog import (
    DEFAULT_ZONES,
    ZoneCatalog,
    catalog_from_settings,
    default_catalog,
    load_zone_catalog,
)

__all__ = [
    "DEFAULT_ZONES",
    "ZoneCatalog",
    "catalog_from_settings",
    "default_catalog",
    "load_zone_catalog",
]
