import logging
import logging.config

import click

import authflow
from ..client import ClientAppAuthentication
from ..config import AuthFlowConfig
from ..exception import AuthFlowConfigurationError
from ..plugin_loader import load_variants

logger = logging.getLogger(__name__)

DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "formatters": {
        "simple": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s.%(funcName)s] %(message)s"
        }
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "level": "DEBUG",
            "formatter": "simple",
        }
    },
    "loggers": {"authflow": {"level": "INFO"}},
    "root": {"level": "INFO", "handlers": ["stdout"]},
}


def select_variants(variants, names):
    """
    Pick the variants with the given plugin names, keeping the order of `names`.
    All variants are returned when no names are given.

    :type variants: list[authflow.variants.base.AuthenticationVariant]
    :type names: Sequence[str]
    :rtype: list[authflow.variants.base.AuthenticationVariant]
    """
    if not names:
        return list(variants)

    by_name = {variant.name: variant for variant in variants}
    unknown = [name for name in names if name not in by_name]
    if unknown:
        raise click.BadParameter(
            "Unknown variant(s) {}, configured: {}".format(unknown, sorted(by_name)),
            param_hint="--variant",
        )
    return [by_name[name] for name in names]


def run_configured_variants(config, names=()):
    """
    Load the configured variants and run the selected ones through the client.

    :type config: str | dict
    :type names: Sequence[str]
    :rtype: list[authflow.variants.base.AuthenticationVariant]
    :return: the variants that were run
    """
    authflow_config = AuthFlowConfig(config)
    logging.config.dictConfig(authflow_config.get("LOGGING", DEFAULT_LOGGING_CONFIG))
    logger.info("Running authflow version {v}".format(v=authflow.__version__))

    selected = select_variants(load_variants(authflow_config), names)
    ClientAppAuthentication.authenticate_all(selected)
    return selected


@click.command()
@click.argument("config")
@click.option("--variant", "variant_names", multiple=True,
              help="Name of a configured variant to run. Can be repeated; defaults to all variants.")
def run_authentication_flow(config, variant_names):
    """
    Run the authentication variants configured in CONFIG.
    """
    try:
        run_configured_variants(config, variant_names)
    except AuthFlowConfigurationError as e:
        cause = " ({})".format(e.__cause__) if e.__cause__ else ""
        raise click.ClickException("{}{}".format(e, cause)) from e
