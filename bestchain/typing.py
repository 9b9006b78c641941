from typing import (
    Iterable,
    NewType,
    Tuple,
)

from eth_typing import (
    Hash32,
)

Weight = NewType("Weight", int)

Height = NewType("Height", int)

# cumulative work is unbounded, it can exceed the range of any single weight
Work = int

HeightRecord = Tuple[Hash32, Height]

HeightRecords = Iterable[HeightRecord]
