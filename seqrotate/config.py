from configparser import ConfigParser as _parser
import logging
import os
from copy import deepcopy
from pathlib import Path

from seqrotate import exceptions, rotlog
from seqrotate.constants import EnvVars, DEFAULT_LOGLEVEL, keystrings
from seqrotate.utils import withlogger

# for convenience and quicker lookup
_SECTION_GENERAL = keystrings.Section.GENERAL
_SECTION_LOGGING = keystrings.Section.LOGGING

_KEY_CHECKMID = keystrings.INI.CHECK_MIDDLE
_KEY_LEVEL = keystrings.INI.LEVEL

## config file schema (and default values) ##
_DEFAULT_CONFIG_={
    _SECTION_GENERAL: {
        _KEY_CHECKMID: "yes",
    },
    _SECTION_LOGGING: {
        _KEY_LEVEL: DEFAULT_LOGLEVEL,
    }
}

# which environment variable overrides which entry
_ENV_OVERRIDES = {
    EnvVars.CHECK_MIDDLE: (_SECTION_GENERAL, _KEY_CHECKMID),
    EnvVars.LOGLEVEL: (_SECTION_LOGGING, _KEY_LEVEL),
}

def _varname(var):
    """Plain-string name of an environment variable (EnvVars member or str)"""
    return getattr(var, "value", var)

@withlogger
class RotateConfig:

    def __init__(self, config_file=None, environ_vars=EnvVars):
        """
        Values are resolved in order: template defaults, then the INI
        file (if any), then environment variables.

        :param config_file: path of an INI file to read. If None, the
            path named by the SEQROTATE_CONFIG environment variable is
            used, if that is set.
        :param environ_vars: an iterable of the environment variables
            to consult.
        """

        self.template = _DEFAULT_CONFIG_ # should be considered 'read-only'

        # in-memory version of the effective configuration
        self.current_values = deepcopy(self.template) # type: dict [str, dict [str, str]]

        # hold all environment variables and their values (if any) here.
        self._environment = {_varname(k):os.getenv(_varname(k), "")
                             for k in environ_vars}

        if config_file is None:
            config_file = self.getenv(EnvVars.CONFIG_FILE) or None

        self._cfile = None if config_file is None else str(config_file)

        if self._cfile:
            self.load_config_file()

        self.apply_environment()

    ##=============================================
    ## Properties
    ##=============================================

    @property
    def config_file(self):
        return self._cfile

    @property
    def env(self):
        """Return the environment-variables mappings"""
        return self._environment

    def getenv(self, varname):
        """
        An analog to os.getenv()

        :param varname:
        :return: the value of the environment variable specified by
            `varname`, or None if the variable is not known
        """
        return self._environment.get(_varname(varname))

    @property
    def check_middle(self):
        """
        Whether rotate() should walk forward and bidirectional ranges to
        verify that `middle` lies within them before touching any
        element. Random-access ranges are always checked.

        :rtype: bool
        """
        value = self.get_value(_SECTION_GENERAL, _KEY_CHECKMID)
        try:
            return _parser.BOOLEAN_STATES[value.strip().lower()]
        except KeyError:
            raise exceptions.ConfigValueError(
                _KEY_CHECKMID, _SECTION_GENERAL, value) from None

    @property
    def log_level(self):
        """Name of the level for the package loggers, upper-cased."""
        value = self.get_value(_SECTION_LOGGING, _KEY_LEVEL).strip().upper()

        # getLevelName returns an int only for registered level names
        if not isinstance(logging.getLevelName(value), int):
            raise exceptions.ConfigValueError(_KEY_LEVEL, _SECTION_LOGGING,
                                              value)
        return value

    ##=============================================
    ## Loading
    ##=============================================

    def read_config(self):
        """
        Return a ConfigParser instance initialized from the config file
        """

        config = _parser()
        config.read(self.config_file)
        return config

    def load_config_file(self):
        """
        Copy every recognized entry of the config file into the current
        values. Unrecognized sections and keys are reported and ignored.
        """
        if not Path(self.config_file).is_file():
            self.LOGGER.warning(f"Config file '{self.config_file}' not found; using defaults")
            return

        parser = self.read_config()

        for section in parser.sections():
            if section not in keystrings.Section:
                self.LOGGER.warning(f"Ignoring unrecognized config section '{section}'")
                continue

            for key, value in parser[section].items():
                try:
                    self._set_value(section, key, value)
                except exceptions.InvalidConfigKeyError as e:
                    self.LOGGER.warning(f"Ignoring entry: {e}")

        self.LOGGER << f"Loaded configuration from {self.config_file}"

    def apply_environment(self):
        """Override current values with any non-empty environment
        variables that map to a config entry."""
        for var, (section, key) in _ENV_OVERRIDES.items():
            value = self.getenv(var)
            if value:
                self._set_value(section, key, value)

    ##=============================================
    ## Getting values
    ##=============================================

    def get_value(self, section, key):
        """
        Returns the current value for the config entry referenced by
        the given section and key

        :param str section:
        :param str key:
        """
        try:
            s = self.current_values[section]
        except KeyError:
            raise exceptions.InvalidConfigSectionError(section) from None

        try:
            return s[key]
        except KeyError:
            raise exceptions.InvalidConfigKeyError(key, section) from None

    def default_value(self, section, key):
        """
        Using the template, return the default value for the entry
        under the given section and key.

        :param str section:
        :param str key:
        """
        return self.template[section][key]

    ##=============================================
    ## Changing values
    ##=============================================

    def _set_value(self, section, key, value):
        """
        Assign to the current values, only for entries present in
        the template.

        :param str section:
        :param str key:
        :param str value:
        """
        try:
            s = self.current_values[section]
        except KeyError:
            raise exceptions.InvalidConfigSectionError(section) from None

        if key not in s:
            raise exceptions.InvalidConfigKeyError(key, section)

        s[key] = value

    def update_value(self, section, key, value):
        """
        Change a value for the remainder of the process. The config
        file is not rewritten.

        :param str section:
        :param str key:
        :param str value:
        """
        self._set_value(section, key, str(value))

        if (section, key) == (_SECTION_LOGGING, _KEY_LEVEL):
            rotlog.set_level(self.log_level)


##=============================================
## Process-wide instance
##=============================================

__config = None # type: RotateConfig

def get_config():
    """
    Return the process-wide configuration, creating it from the
    environment on first use.

    :rtype: RotateConfig
    """
    if __config is None:
        register_config(RotateConfig())
    return __config

def register_config(cfg):
    """
    Make `cfg` the process-wide configuration and apply its logging
    level.

    :param RotateConfig cfg:
    """
    global __config
    __config = cfg
    rotlog.set_level(cfg.log_level)
