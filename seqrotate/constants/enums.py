from enum import Enum, IntEnum

__all__=["Capability", "EnvVars"]

##=============================================
## IntEnums
##=============================================

# IntEnum so that tiers compare by strength: a collection offering
# RANDOM_ACCESS also offers everything below it.
class Capability(IntEnum):
    """Traversal capability declared by a collection."""
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

##=============================================
## Str-enums
##=============================================

class EnvVars(str, Enum):
    CONFIG_FILE = "SEQROTATE_CONFIG"
    CHECK_MIDDLE = "SEQROTATE_CHECK_MIDDLE"
    LOGLEVEL = "SEQROTATE_LOGLEVEL"
