# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

'''
Configuration information pulled from pomo-lazr.conf.

The configuration instance used is specified using the POMOCONFIG
environment variable, and defaults to 'development'.
'''

__all__ = [
    'config',
    'PomoConfig',
    ]


import os

from lazr.config import ImplicitTypeSchema
from lazr.config.interfaces import ConfigErrors


# POMOCONFIG specifies the config to use, which corresponds to a
# subdirectory of this package.
POMOCONFIG = 'POMOCONFIG'
DEFAULT_CONFIG = 'development'


class PomoConfig:
    """
    Singleton configuration, accessed via the `config` module global.

    The configuration is loaded on first access and validated against
    schema-lazr.conf.
    """
    _config = None

    def __init__(self, instance_name=None):
        if instance_name is None:
            instance_name = os.environ.get(POMOCONFIG, DEFAULT_CONFIG)
        self._instance_name = instance_name

    @property
    def instance_name(self):
        """Return the config's instance name.

        This normally corresponds to the POMOCONFIG environment variable.
        It is also the name of the directory the conf file is loaded from.
        """
        return self._instance_name

    def setInstance(self, instance_name):
        """Set the instance name where the conf file is stored.

        The loaded config is dropped, so the next access reads the new
        instance's conf file.
        """
        self._instance_name = instance_name
        self._config = None

    def _getConfig(self):
        """Get the schema and config for this environment.

        The config will be loaded only when there is not a config.
        Repeated calls to this method will not cause the config to reload.
        """
        if self._config is not None:
            return self._config

        here = os.path.dirname(__file__)
        schema_file = os.path.join(here, 'schema-lazr.conf')
        config_file = os.path.join(
            here, self.instance_name, 'pomo-lazr.conf')
        schema = ImplicitTypeSchema(schema_file)
        loaded = schema.load(config_file)
        try:
            loaded.validate()
        except ConfigErrors as error:
            message = '\n'.join([str(e) for e in error.errors])
            raise ConfigErrors(message, errors=error.errors)
        self._config = loaded
        return loaded

    def __getattr__(self, name):
        return getattr(self._getConfig(), name)

    def __contains__(self, key):
        return key in self._getConfig()

    def __getitem__(self, key):
        return self._getConfig()[key]


config = PomoConfig()
