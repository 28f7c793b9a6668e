class Error(Exception):
    """Base class for all seqrotate errors"""

class GeneralError(Error):
    """
    Generic exception that accepts an explanatory string.
    """
    def __init__(self, message:str):
        super().__init__(message)
        self.msg = message
    def __str__(self):
        return self.msg

#----------------------------

class InvalidMiddleError(GeneralError, ValueError):
    """
    Raised when the requested middle position does not lie within the
    closed range ``[first, last]`` of the range being rotated.
    """
    def __init__(self, middle, first, last):
        self.middle = middle
        self.first = first
        self.last = last
        super().__init__(
            f"Middle position {middle!r} is not within [{first!r}, {last!r}]")

class CapabilityError(GeneralError, TypeError):
    """
    Raised when an object does not offer the traversal capability an
    operation requires (e.g. reversing a forward-only list).
    """
    def __init__(self, obj, required=None):
        self.obj_type = type(obj)
        self.required = required
        if required is None:
            msg = f"'{self.obj_type.__name__}' is not a rotatable collection"
        else:
            msg = (f"'{self.obj_type.__name__}' does not offer "
                   f"{required.name.lower()} traversal")
        super().__init__(msg)

#----------------------------
class ConfigError(Error):
    """Base class for configuration-related exceptions."""
    def __init__(self, key, section):
        self.section = section
        self.key = key

class InvalidConfigSectionError(GeneralError):
    def __init__(self, section):
        self.section = section
        super().__init__(f"Invalid section header '{section}'")

class InvalidConfigKeyError(ConfigError):
    """
    A key was requested from the configuration that is not present in the schema
    """
    def __str__(self):
        return f"'{self.key}' is not a valid configuration key for section '{self.section}'."

class ConfigValueError(ConfigError):
    """The key exists, but its value cannot be interpreted."""
    def __init__(self, key, section, value):
        super().__init__(key, section)
        self.value = value

    def __str__(self):
        return (f"Invalid value {self.value!r} for configuration parameter "
                f"'{self.key}' in section '{self.section}'.")
