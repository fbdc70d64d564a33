"""
YAML loading for authflow configuration files.

Registers two tags on the safe loader:
  !ENV NAME      value of the environment variable NAME
  !ENVFILE NAME  content of the file whose path is in the environment variable NAME
"""
import os

from yaml import SafeLoader as _safe_loader
from yaml import YAMLError
from yaml import safe_load as load

__all__ = ["load", "YAMLError", "TAG_ENV", "TAG_ENVFILE"]


def _constructor_env_variables(loader, node):
    raw_value = loader.construct_scalar(node)
    new_value = os.environ.get(raw_value)
    if new_value is None:
        msg = "Environment variable {name} is not set for {node}".format(name=raw_value, node=node.tag)
        raise YAMLError(msg)
    return new_value


def _constructor_envfile_variables(loader, node):
    raw_value = loader.construct_scalar(node)
    filepath = os.environ.get(raw_value)
    try:
        with open(filepath, "r") as fd:
            new_value = fd.read()
    except (TypeError, IOError) as e:
        msg = "Cannot read {node} value from {path}".format(node=node.tag, path=filepath)
        raise YAMLError(msg) from e
    return new_value.strip()


TAG_ENV = "!ENV"
TAG_ENVFILE = "!ENVFILE"


_safe_loader.add_constructor(TAG_ENV, _constructor_env_variables)
_safe_loader.add_constructor(TAG_ENVFILE, _constructor_envfile_variables)
