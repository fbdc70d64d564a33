"""
Some help functions to load authentication variants named in the configuration
"""
import json
import logging
import sys
from contextlib import contextmanager
from pydoc import locate

from .exception import AuthFlowConfigurationError
from .variants.base import AuthenticationVariant

logger = logging.getLogger(__name__)


@contextmanager
def prepend_to_import_path(import_paths):
    import_paths = import_paths or []
    for p in reversed(import_paths):  # insert the specified plugin paths in the same order
        sys.path.insert(0, p)
    try:
        yield
    finally:
        del sys.path[0:len(import_paths)]  # restore sys.path


def variant_filter(cls):
    """
    Verify that the type is a proper subclass of AuthenticationVariant.

    :type cls: type
    :rtype: bool

    :param cls: A class object
    :return: True if match, else false
    """
    return isinstance(cls, type) and issubclass(cls, AuthenticationVariant) and cls != AuthenticationVariant


def load_variants(config):
    """
    Load all authentication variants specified in the config

    :type config: authflow.config.AuthFlowConfig
    :rtype: list[authflow.variants.base.AuthenticationVariant]

    :param config: The authflow configuration
    :return: A list of variant instances, in configuration order
    """
    variants = _load_plugins(config.get("CUSTOM_PLUGIN_MODULE_PATHS"), config["VARIANTS"], variant_filter)
    logger.info("Loaded authentication variants: %s" % [variant.name for variant in variants])
    return variants


def _load_plugins(plugin_paths, plugins, plugin_filter):
    """
    Loads variant plugins

    :type plugin_paths: list[str]
    :type plugins: list[dict[str, Any]]
    :type plugin_filter: type -> bool
    :rtype list[authflow.variants.base.AuthenticationVariant]

    :param plugin_paths: Paths to prepend to the import path while loading
    :param plugins: A list of plugin configs
    :param plugin_filter: Filter what to load from the module file
    :return: A list with all the loaded plugins
    """
    loaded_plugins = []
    with prepend_to_import_path(plugin_paths):
        for plugin_config in plugins:
            try:
                module_class = _load_plugin_module(plugin_config, plugin_filter)
            except AuthFlowConfigurationError as e:
                raise AuthFlowConfigurationError("Configuration error in {}".format(json.dumps(plugin_config))) from e

            module_config = _replace_variables_in_plugin_config(plugin_config.get("config") or {},
                                                                plugin_config["name"])
            try:
                instance = module_class(name=plugin_config["name"], config=module_config)
            except TypeError as e:
                raise AuthFlowConfigurationError(
                    "Could not instantiate variant '{}'".format(plugin_config["module"])) from e
            loaded_plugins.append(instance)
    return loaded_plugins


def _load_plugin_module(plugin_config, plugin_filter):
    _mandatory_params = ("name", "module")
    if not all(k in plugin_config for k in _mandatory_params):
        raise AuthFlowConfigurationError("Missing mandatory plugin configuration parameter: {}".format(_mandatory_params))

    module_class = locate(plugin_config["module"])
    if not module_class:
        raise AuthFlowConfigurationError("Can't find module '%s'" % plugin_config["module"])
    if not plugin_filter(module_class):
        raise AuthFlowConfigurationError("'%s' is not an authentication variant" % plugin_config["module"])

    return module_class


def _replace_variables_in_plugin_config(module_config, name):
    config = json.dumps(module_config)
    config = config.replace("<name>", name)
    return json.loads(config)
