"""
This module contains methods to load and verify configurations for authflow.
"""
import logging
import os
import os.path

from authflow.exception import AuthFlowConfigurationError
from authflow.yaml import load as yaml_load
from authflow.yaml import YAMLError


logger = logging.getLogger(__name__)


class AuthFlowConfig(object):
    """
    A configuration class for authflow. Verifies that the given config holds all the
    necessary parameters.
    """
    mandatory_dict_keys = ["VARIANTS"]

    def __init__(self, config):
        """
        Reads a given config and builds the AuthFlowConfig.

        :type config: str | dict
        :rtype: authflow.config.AuthFlowConfig

        :param config: Can be a file path or a dictionary
        :return: A verified AuthFlowConfig
        """
        parsers = [self._load_dict, self._load_yaml]
        for parser in parsers:
            self._config = parser(config)
            if self._config is not None:
                break

        self._verify_dict(self._config)

        # Read variant configs from dict or file path
        plugin_configs = []
        for variant_config in self._config["VARIANTS"] or []:
            for parser in parsers:
                plugin_config = parser(variant_config)
                if plugin_config:
                    plugin_configs.append(plugin_config)
                    break
            else:
                raise AuthFlowConfigurationError("Failed to load variant config '{}'".format(variant_config))
        self._config["VARIANTS"] = plugin_configs

    def _verify_dict(self, conf):
        """
        Check that the configuration contains all necessary keys.

        :type conf: dict
        :rtype: None
        :raise AuthFlowConfigurationError: if the configuration is incorrect
        """
        if not conf or not isinstance(conf, dict):
            raise AuthFlowConfigurationError("Missing configuration or unknown format")

        for key in AuthFlowConfig.mandatory_dict_keys:
            if key not in conf:
                raise AuthFlowConfigurationError("Missing key '%s' in config" % key)

    def __getitem__(self, item):
        return self._config[item]

    def __setitem__(self, key, value):
        self._config[key] = value

    def __contains__(self, key):
        return key in self._config

    def get(self, item, default=None):
        return self._config.get(item, default)

    def _load_dict(self, config):
        if isinstance(config, dict):
            return config

        return None

    def _load_yaml(self, config_file):
        """
        Load config from yaml file

        :type config_file: str
        :rtype: dict

        :param config_file: path to the config file
        :return: Loaded config, or None if the file could not be read or parsed
        """
        if not isinstance(config_file, str):
            return None

        try:
            with open(os.path.abspath(config_file)) as f:
                return yaml_load(f.read())
        except YAMLError as exc:
            logger.error("Could not parse config as YAML: {}".format(exc))
            if hasattr(exc, 'problem_mark'):
                mark = exc.problem_mark
                logger.error("Error position: ({line}:{column})".format(line=mark.line + 1, column=mark.column + 1))
        except IOError as e:
            logger.error("Could not open config file: {}".format(e))

        return None
