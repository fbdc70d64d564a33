LOG_FMT = "[{id}] {message}"


def get_variant_name(variant):
    variant_name = getattr(variant, "name", None) or "UNKNOWN"
    return variant_name


def authflow_logging(logger, level, message, variant, **kwargs):
    """
    Adds the variant name to the message.

    :type logger: logging
    :type level: int
    :type message: str
    :type variant: authflow.variants.base.AuthenticationVariant

    :param logger: Logger to use
    :param level: Logger level (ex: logging.DEBUG/logging.WARN/...)
    :param message: Message
    :param variant: The variant running the step
    :param kwargs: set exc_info=True to get an exception stack trace in the log
    """
    variant_name = get_variant_name(variant)
    logline = LOG_FMT.format(id=variant_name, message=message)
    kwargs.setdefault("stacklevel", 2)
    logger.log(level, logline, **kwargs)
