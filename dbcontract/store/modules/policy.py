"""Policy slice: column-level data-masking rules."""
from __future__ import annotations

from dbcontract.codec import MaskingLevel, MaskingLevelField
from dbcontract.store.base import EntityStore, WireModel


def masking_rule_name(database: str, table: str, column: str) -> str:
    return f"{database}/tables/{table}/columns/{column}"


class MaskingRule(WireModel):
    """Masking level applied to one column of one database table."""

    name: str
    database: str
    table: str
    column: str
    masking_level: MaskingLevelField = MaskingLevel.MASKING_LEVEL_UNSPECIFIED


class PolicyStore(EntityStore[MaskingRule]):
    entity_type = MaskingRule

    def effective_masking_level(
        self,
        database: str,
        table: str,
        column: str,
        default: MaskingLevel = MaskingLevel.FULL,
    ) -> MaskingLevel:
        """Return the masking level for a column.

        Missing rules, unset levels and levels this build does not recognize
        all resolve to ``default``, which should be the most restrictive level
        the caller can render.
        """

        rule = self.get(masking_rule_name(database, table, column))
        if rule is None:
            return default
        level = rule.masking_level
        if level is MaskingLevel.MASKING_LEVEL_UNSPECIFIED or not level.recognized:
            return default
        return level

    def rules_for_database(self, database: str) -> list[MaskingRule]:
        return [rule for rule in self.list_all() if rule.database == database]


policy_store = PolicyStore()

__all__ = ["MaskingRule", "PolicyStore", "masking_rule_name", "policy_store"]
