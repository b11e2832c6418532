"""Shortlist: candidate matching, elimination and scoring engine."""

from src.utils.constants import APP_NAME as __app_name__
from src.utils.constants import VERSION as __version__

__all__ = ["__app_name__", "__version__"]
