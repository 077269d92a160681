"""Static description of the entity graph.

The graph is derived once from ``Base.metadata`` and maps each entity name
to its table, primary key and foreign keys (with their ``ON DELETE``
rules). It is what the CLI prints and what the cascade rules are checked
against in tests.
"""

from dataclasses import dataclass, field
from functools import lru_cache

from sqlalchemy import MetaData

ENTITY_NAMES = {
    "users": "User",
    "recommendations": "Recommendation",
    "collections": "Collection",
    "collection_recommendations": "CollectionRecommendation",
}


@dataclass(frozen=True)
class ForeignKeySpec:
    """A single-column foreign key.

    Attributes:
        column: Referencing column.
        target_table: Referenced table.
        target_column: Referenced column.
        on_delete: ON DELETE action (e.g. ``CASCADE``) or None.
    """

    column: str
    target_table: str
    target_column: str
    on_delete: str | None = None


@dataclass(frozen=True)
class EntitySchema:
    """Keys and references of one entity."""

    name: str
    table: str
    primary_key: tuple[str, ...]
    foreign_keys: tuple[ForeignKeySpec, ...] = field(default_factory=tuple)

    @property
    def has_composite_key(self) -> bool:
        return len(self.primary_key) > 1


def build_schema_graph(metadata: MetaData) -> dict[str, EntitySchema]:
    """Build the entity graph from table metadata.

    Args:
        metadata: Metadata holding the mapped tables.

    Returns:
        Mapping of entity name to its schema description.
    """
    graph: dict[str, EntitySchema] = {}
    for table in metadata.sorted_tables:
        name = ENTITY_NAMES.get(table.name, table.name)
        foreign_keys = tuple(
            ForeignKeySpec(
                column=fk.parent.name,
                target_table=fk.column.table.name,
                target_column=fk.column.name,
                on_delete=fk.ondelete.upper() if fk.ondelete else None,
            )
            for fk in sorted(table.foreign_keys, key=lambda fk: fk.parent.name)
        )
        graph[name] = EntitySchema(
            name=name,
            table=table.name,
            primary_key=tuple(column.name for column in table.primary_key.columns),
            foreign_keys=foreign_keys,
        )
    return graph


def cascade_targets(graph: dict[str, EntitySchema], table: str) -> list[str]:
    """List tables whose rows are deleted when a row of ``table`` is deleted.

    Follows ``ON DELETE CASCADE`` references transitively.

    Args:
        graph: Schema graph from ``build_schema_graph``.
        table: Name of the table a row is deleted from.

    Returns:
        Affected table names in discovery order, excluding ``table`` itself.
    """
    found: list[str] = []
    pending = [table]
    while pending:
        current = pending.pop(0)
        for entity in graph.values():
            if entity.table in found or entity.table == table:
                continue
            for fk in entity.foreign_keys:
                if fk.target_table == current and fk.on_delete == "CASCADE":
                    found.append(entity.table)
                    pending.append(entity.table)
                    break
    return found


@lru_cache
def get_schema_graph() -> dict[str, EntitySchema]:
    """Get the schema graph of the registered models, built once."""
    from curator.infrastructure.persistence import models  # noqa: F401
    from curator.infrastructure.persistence.database import Base

    return build_schema_graph(Base.metadata)
