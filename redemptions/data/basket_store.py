from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from pathlib import Path

from redemptions.domain.errors import ConfigurationError


class BasketStore:
    """JSON snapshot of the basket: its payout order and its membership set.

    Both are kept because a removal can unmark an asset that still holds another
    slot in the order. Snapshots without ``members`` derive it from the order.
    """

    def __init__(self, data_dir: str, filename: str = "basket.json"):
        self.path = Path(data_dir) / filename

    def exists(self) -> bool:
        return self.path.exists()

    def write(self, assets: Sequence[str], members: Iterable[str] | None = None) -> None:
        order = list(assets)
        payload = {
            "assets": order,
            "members": sorted(set(order) if members is None else set(members)),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=True, separators=(",", ":")))
        tmp.replace(self.path)

    def read(self) -> tuple[list[str], list[str]]:
        if not self.path.exists():
            return [], []
        try:
            payload = json.loads(self.path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"basket snapshot unreadable: {self.path}") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("assets"), list):
            raise ConfigurationError(f"basket snapshot has no asset list: {self.path}")
        assets = [str(a) for a in payload["assets"]]
        members = payload.get("members")
        if members is None:
            return assets, sorted(set(assets))
        if not isinstance(members, list):
            raise ConfigurationError(f"basket snapshot has a malformed member list: {self.path}")
        return assets, [str(a) for a in members]
