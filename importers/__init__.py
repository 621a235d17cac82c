# =============================================================================
# importers/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the importers folder a package and provides easy imports.
#
# AVAILABLE IMPORTERS:
#   - SnapshotImporter: reads the stored JSON blob (days + expenses)
#   - export_snapshot: turns typed snapshots back into the stored JSON shape
# =============================================================================

from .snapshot_importer import SnapshotImporter, export_snapshot
