"""Translation coordination for multi-source localization catalogs."""
