"""Rules of the filtered stream."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StreamAddRule:
    """A rule to add to the filtered stream."""

    value: str
    tag: str = ""


@dataclass
class StreamDeleteRule:
    """Identifiers of rules to remove from the filtered stream."""

    ids: list[str] = field(default_factory=list)


@dataclass
class StreamRuleChange:
    """Rules to add and/or delete in one request."""

    add: list[StreamAddRule] = field(default_factory=list)
    delete: StreamDeleteRule | None = None

    def validate(self) -> None:
        """Raise ValueError unless the change is complete enough to send."""
        if not self.add and self.delete is None:
            raise ValueError("tweet search stream rules: there must be add or delete rules")
        if any(not rule.value for rule in self.add):
            raise ValueError("tweet search stream rules: add value is required")
        if self.delete is not None and not self.delete.ids:
            raise ValueError("tweet search stream rules: delete ids are required")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON request body."""
        body: dict[str, Any] = {}
        if self.add:
            body["add"] = [
                {"value": r.value, "tag": r.tag} if r.tag else {"value": r.value} for r in self.add
            ]
        if self.delete is not None:
            body["delete"] = {"ids": list(self.delete.ids)}
        return body


@dataclass
class StreamRuleData:
    """A rule as reported by the server."""

    id: str = ""
    value: str = ""
    tag: str = ""


@dataclass
class StreamRuleSummary:
    """Counts of rules created and deleted."""

    created: int = 0
    not_created: int = 0
    deleted: int = 0
    not_deleted: int = 0


@dataclass
class StreamRuleMeta:
    """When the rules were sent and what happened to them."""

    sent: str = ""
    summary: StreamRuleSummary = field(default_factory=StreamRuleSummary)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class StreamRules:
    """The rules returned by the rules endpoint."""

    data: list[StreamRuleData] = field(default_factory=list)
    meta: StreamRuleMeta = field(default_factory=StreamRuleMeta)

    @classmethod
    def from_dict(cls, data: Any) -> StreamRules:
        document = _mapping(data, "stream rules")
        raw_rules = document.get("data") or []
        if not isinstance(raw_rules, list):
            raise TypeError("stream rules: data must be a JSON array")
        rules = []
        for item in raw_rules:
            r = _mapping(item, "rule")
            rules.append(
                StreamRuleData(id=r.get("id") or "", value=r.get("value") or "", tag=r.get("tag") or "")
            )
        meta = _mapping(document.get("meta"), "meta")
        summary = _mapping(meta.get("summary"), "summary")
        return cls(
            data=rules,
            meta=StreamRuleMeta(
                sent=meta.get("sent") or "",
                summary=StreamRuleSummary(
                    created=summary.get("created") or 0,
                    not_created=summary.get("not_created") or 0,
                    deleted=summary.get("deleted") or 0,
                    not_deleted=summary.get("not_deleted") or 0,
                ),
            ),
        )