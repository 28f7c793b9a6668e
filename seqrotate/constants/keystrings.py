"""
Containers for the strings used as section and key names in the
configuration. Use these instead of raw strings so the schema stays
in one place.
"""

__all__=["Section", "INI"]

##=============================================
## Metaclass
##=============================================

class Iternum(type):
    """
    Using this as a metaclass, one can test membership against the public
    class-level fields of a non-instantiated subclass (ie the type object itself).
    """
    def __contains__(cls, val):
        return val in [v for k,v in cls.__dict__.items() if not k.startswith('_')]

##=============================================
## Implementations
##=============================================

class Section(metaclass=Iternum):
    """Configuration headings in the INI file."""
    GENERAL = "general"
    LOGGING = "logging"

class INI(metaclass=Iternum):
    """Keys valid within the configuration sections."""
    CHECK_MIDDLE = "check_middle"
    LEVEL = "level"
