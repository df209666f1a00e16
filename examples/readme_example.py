import json
from dataclasses import dataclass, field
from enum import Enum

from objecty import assign, changes, clone, clone_with_ancestry, merge, merge_safe, project


class Tier(Enum):
    FREE = "free"
    PRO = "pro"


@dataclass
class Quota:
    requests: int
    storage_mb: int

    def __project__(self) -> str:
        return f"{self.requests} req / {self.storage_mb} MB"


@dataclass
class Account:
    """Account record: plain fields plus a read-only derived property."""

    owner: str
    tier: Tier = Tier.FREE
    quota: Quota = field(default_factory=lambda: Quota(100, 10))
    tags: list[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.owner} ({self.tier.value})"


DEFAULTS = {
    "retries": 3,
    "db": {"host": "localhost", "port": 5432},
    "features": ["search"],
}


def main() -> None:
    # Layer user overrides on top of a private copy of the defaults
    config = clone(DEFAULTS)
    merge(config, {"db": {"port": 6543}, "features": ["export"]})
    print("merged:", config)

    # Back-fill anything the user left out, without touching their choices
    user = {"retries": 0, "db": None}
    merge_safe(user, DEFAULTS)
    print("safe-merged:", user)

    print("changes vs defaults:", changes(config, DEFAULTS))

    account = Account("ann", tags=["beta"])
    upgraded = clone_with_ancestry(account)
    assign(upgraded, {"tier": Tier.PRO, "label": "ignored"})
    upgraded.quota.requests = 1000
    print("original:", account.label, "| upgraded:", upgraded.label)
    print("account diff:", changes(upgraded, account))

    print("projected:", json.dumps(project(upgraded, excludes=["tier"])))


if __name__ == "__main__":
    main()
