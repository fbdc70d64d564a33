from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _resolve_package_version


def _parse_version():
    try:
        value = _resolve_package_version("authflow")
    except PackageNotFoundError:
        value = "0.0.0"
    return value


version = _parse_version()
