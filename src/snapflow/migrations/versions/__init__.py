"""
SnapFlow migration catalog.

Definitions are listed in application order. Append new migrations
to the end; never edit, reorder or remove a shipped one.
"""

from snapflow.migrations.catalog import MigrationCatalog
from snapflow.migrations.versions import (
    v001_create_users_table,
    v002_create_categories_table,
    v003_create_items_table,
    v004_create_customers_table,
    v005_create_projects_table,
    v006_create_floorplans_table,
    v007_create_placements_table,
    v008_add_full_name_to_users,
    v009_create_item_variants_table,
    v010_create_item_addons_table,
    v011_add_base_model_number_to_items,
    v012_update_placements_for_variants,
    v013_make_items_columns_nullable,
    v014_create_variant_addons_table,
    v015_create_refresh_tokens_table,
    v016_add_is_active_to_catalog,
    v017_drop_item_addons_table,
    v018_remove_customers_table,
    v019_add_unique_project_name_customer,
    v020_create_floorplan_bom_entries,
    v021_update_placements_for_bom,
    v022_backfill_placements_to_bom,
    v023_rename_bom_add_project,
)

CATALOG = MigrationCatalog(
    [
        v001_create_users_table.MIGRATION,
        v002_create_categories_table.MIGRATION,
        v003_create_items_table.MIGRATION,
        v004_create_customers_table.MIGRATION,
        v005_create_projects_table.MIGRATION,
        v006_create_floorplans_table.MIGRATION,
        v007_create_placements_table.MIGRATION,
        v008_add_full_name_to_users.MIGRATION,
        v009_create_item_variants_table.MIGRATION,
        v010_create_item_addons_table.MIGRATION,
        v011_add_base_model_number_to_items.MIGRATION,
        v012_update_placements_for_variants.MIGRATION,
        v013_make_items_columns_nullable.MIGRATION,
        v014_create_variant_addons_table.MIGRATION,
        v015_create_refresh_tokens_table.MIGRATION,
        v016_add_is_active_to_catalog.MIGRATION,
        v017_drop_item_addons_table.MIGRATION,
        v018_remove_customers_table.MIGRATION,
        v019_add_unique_project_name_customer.MIGRATION,
        v020_create_floorplan_bom_entries.MIGRATION,
        v021_update_placements_for_bom.MIGRATION,
        v022_backfill_placements_to_bom.MIGRATION,
        v023_rename_bom_add_project.MIGRATION,
    ]
)

__all__ = ["CATALOG"]
