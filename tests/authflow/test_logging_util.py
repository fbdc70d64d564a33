import logging

from authflow.logging_util import authflow_logging, get_variant_name
from authflow.variants.pin import PINAuthentication


class Nameless(object):
    pass


def test_get_variant_name():
    assert get_variant_name(PINAuthentication("pin")) == "pin"


def test_get_variant_name_unknown():
    assert get_variant_name(Nameless()) == "UNKNOWN"
    assert get_variant_name(None) == "UNKNOWN"


def test_authflow_logging_prefixes_variant_name(caplog):
    logger = logging.getLogger("test_authflow_logging")
    logger.setLevel(logging.DEBUG)
    authflow_logging(logger, logging.WARNING, "testmessage", PINAuthentication("pin"))
    assert caplog.messages == ["[pin] testmessage"]
    assert caplog.records[0].levelno == logging.WARNING


def test_authflow_logging_reports_calling_function(caplog):
    caplog.set_level(logging.INFO)
    PINAuthentication("pin").server_authentication()
    assert caplog.records[0].funcName == "server_authentication"
    assert caplog.records[0].module == "pin"


def test_authflow_logging_reports_default_step(caplog):
    caplog.set_level(logging.INFO)
    PINAuthentication("pin").internet_connectivity_check()
    assert caplog.records[0].funcName == "internet_connectivity_check"
    assert caplog.records[0].name == "authflow.variants.base"


def test_authflow_logging_passes_exc_info(caplog):
    logger = logging.getLogger("test_authflow_logging_exc")
    logger.setLevel(logging.DEBUG)
    try:
        raise ValueError("boom")
    except ValueError:
        authflow_logging(logger, logging.ERROR, "failed", Nameless(), exc_info=True)
    assert caplog.messages == ["[UNKNOWN] failed"]
    assert caplog.records[0].exc_info[0] is ValueError
