"""Tabular export of normalized entities."""

from onlycare.export.frames import entities_to_frame, entity_to_row, export_entities

__all__ = ["entities_to_frame", "entity_to_row", "export_entities"]
