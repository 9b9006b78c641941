from typing import (
    Dict,
    Optional,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    ValidationError,
    encode_hex,
)

from bestchain.abc import (
    WorkMemoAPI,
)
from bestchain.typing import (
    Work,
)


class WorkMemo(WorkMemoAPI):
    def __init__(self, kv_store: Dict[Hash32, Work] = None) -> None:
        if kv_store is None:
            self.kv_store = {}
        else:
            self.kv_store = kv_store

    def get(self, identity: Hash32) -> Optional[Work]:
        return self.kv_store.get(identity)

    def record(self, identity: Hash32, work: Work) -> None:
        try:
            existing = self.kv_store[identity]
        except KeyError:
            self.kv_store[identity] = work
        else:
            # the memo only grows; a second, different total means the store
            # changed underneath it
            if existing != work:
                raise ValidationError(
                    f"Conflicting work for {encode_hex(identity)}: "
                    f"already recorded {existing}, got {work}"
                )

    def __contains__(self, identity: object) -> bool:
        return identity in self.kv_store

    def __len__(self) -> int:
        return len(self.kv_store)
