"""
Configuration package for the motel management backend.

Environment settings for the API, database, mail/SMS transports,
scheduler and logging.
"""

from motel.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']
