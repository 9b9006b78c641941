from rlp.sedes import (
    BigEndianInt,
    Binary,
)

hash32 = Binary.fixed_length(32)
uint32 = BigEndianInt(4)
