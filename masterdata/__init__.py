"""Master data service: lists, item categories, integrations and key-value configuration."""
