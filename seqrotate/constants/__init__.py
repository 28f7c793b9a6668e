from .enums import *
from . import keystrings

APPNAME = "seqrotate"

# level used when neither the config file nor the environment set one
DEFAULT_LOGLEVEL = "WARNING"
