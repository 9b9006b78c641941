from eth_typing import (
    Hash32,
)

#
# Header record layout
#
HEADER_SIZE = 80
PARENT_IDENTITY_OFFSET = 4
WEIGHT_OFFSET = 72
WEIGHT_SIZE = 4

#
# Height record layout
#
HEIGHT_RECORD_SIZE = 36
HEIGHT_SIZE = 4

HASH_SIZE = 32
ZERO_HASH32 = Hash32(HASH_SIZE * b"\x00")

UINT_32_MAX = 2**32 - 1

GENESIS_HEIGHT = 0

#
# Environment configuration
#
LOG_LEVEL_ENV_VAR = "BESTCHAIN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
