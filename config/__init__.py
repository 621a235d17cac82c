# =============================================================================
# config/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the 'config' folder a package and re-exports the settings so other
#   files can write:
#       from config import RATES, CARRIERS
#   instead of:
#       from config.settings import RATES, CARRIERS
# =============================================================================

from .settings import *
