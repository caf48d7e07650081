"""Backfill existing placements into floorplan BOM entries.

For every placement not yet linked to a BOM entry, reuse the
floorplan's main entry for the placement's variant or create one
(snapshotting name, model number, price and picture), add child
entries for the variant's required add-ons, then link the placement.
Placements without a floorplan or with a missing variant are left
unlinked and reported.
"""

from typing import TYPE_CHECKING, Any

from loguru import logger

from snapflow.models.migration import MigrationDefinition

if TYPE_CHECKING:
    from snapflow.ports.db_session import DbSessionPort

_INSERT_ENTRY_SQL = """
INSERT INTO floorplan_bom_entries (
    floorplan_id, item_id, variant_id, parent_bom_entry_id,
    name_snapshot, model_number_snapshot, price_snapshot, picture_path
)
VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""


async def apply_migration(db: "DbSessionPort") -> None:
    """Apply v022 migration: link placements to BOM entries."""
    placements = await db.fetchall(
        """
        SELECT id, floorplan_id, item_variant_id
        FROM placements
        WHERE bom_entry_id IS NULL
        ORDER BY id
        """
    )
    logger.info("Backfilling {} placement(s) into BOM entries", len(placements))

    linked = 0
    skipped = 0
    for placement in placements:
        if placement["floorplan_id"] is None:
            logger.warning("Placement {} has no floorplan; left unlinked", placement["id"])
            skipped += 1
            continue

        variant = await db.fetchone(
            """
            SELECT v.id AS variant_id, v.item_id, v.style_name, v.price, v.image_path,
                   i.name, i.base_model_number
            FROM item_variants v
            JOIN items i ON v.item_id = i.id
            WHERE v.id = ?
            """,
            [placement["item_variant_id"]],
        )
        if variant is None:
            logger.warning(
                "Variant {} not found for placement {}; left unlinked",
                placement["item_variant_id"],
                placement["id"],
            )
            skipped += 1
            continue

        bom_entry_id = await _main_entry_id(db, placement["floorplan_id"], variant)
        await db.execute(
            "UPDATE placements SET bom_entry_id = ? WHERE id = ?",
            [bom_entry_id, placement["id"]],
        )
        linked += 1

    logger.info("Placement backfill done: linked={} skipped={}", linked, skipped)


async def _main_entry_id(db: "DbSessionPort", floorplan_id: int, variant: Any) -> int:
    """Existing main BOM entry for this floorplan and variant, or a new one."""
    existing = await db.fetchone(
        """
        SELECT id FROM floorplan_bom_entries
        WHERE floorplan_id = ? AND variant_id = ? AND parent_bom_entry_id IS NULL
        """,
        [floorplan_id, variant["variant_id"]],
    )
    if existing is not None:
        return int(existing["id"])

    cursor = await db.execute(
        _INSERT_ENTRY_SQL,
        [
            floorplan_id,
            variant["item_id"],
            variant["variant_id"],
            None,
            variant["name"] or "Unknown",
            variant["base_model_number"] or variant["style_name"] or "",
            variant["price"] or 0,
            variant["image_path"],
        ],
    )
    entry_id = int(cursor.lastrowid)
    logger.debug("Created BOM entry {} for {}", entry_id, variant["name"])

    addons = await db.fetchall(
        """
        SELECT va.addon_variant_id, av.item_id AS addon_item_id,
               av.price AS addon_price, av.image_path AS addon_image,
               ai.name AS addon_name, ai.base_model_number AS addon_base_model
        FROM variant_addons va
        JOIN item_variants av ON va.addon_variant_id = av.id
        JOIN items ai ON av.item_id = ai.id
        WHERE va.variant_id = ? AND va.is_optional = 0
        ORDER BY va.sort_order, va.id
        """,
        [variant["variant_id"]],
    )
    for addon in addons:
        await db.execute(
            _INSERT_ENTRY_SQL,
            [
                floorplan_id,
                addon["addon_item_id"],
                addon["addon_variant_id"],
                entry_id,
                addon["addon_name"] or "Unknown",
                addon["addon_base_model"] or "",
                addon["addon_price"] or 0,
                addon["addon_image"],
            ],
        )

    return entry_id


MIGRATION = MigrationDefinition(name="022_backfill_placements_to_bom", body=apply_migration)
