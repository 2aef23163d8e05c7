"""Catalog harvester: crawls a storefront and snapshots its products as JSON."""
