import logging
from unittest.mock import Mock

import pytest

from authflow.variants.face_id import FaceIDAuthentication
from authflow.variants.pin import PINAuthentication
from authflow.variants.touch_id import TouchIDAuthentication

EXPECTED_STEP_ORDER = [
    "check_device_capability",
    "check_device_eligibility",
    "local_authentication",
    "internet_connectivity_check",
    "server_authentication",
]


@pytest.fixture
def expected_step_order():
    return list(EXPECTED_STEP_ORDER)


@pytest.fixture
def record_steps():
    """
    Wraps the steps of a variant instance so the order of the calls can be read
    back from the returned mock. The wrapped steps still run.
    """
    def _record(variant):
        recorder = Mock()
        for step in EXPECTED_STEP_ORDER:
            recorder.attach_mock(Mock(wraps=getattr(variant, step)), step)
            setattr(variant, step, getattr(recorder, step))
        return recorder

    return _record


@pytest.fixture
def called_steps():
    def _called(recorder):
        return [name for name, args, kwargs in recorder.mock_calls]

    return _called


@pytest.fixture
def info_caplog(caplog):
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def pin_variant():
    return PINAuthentication("pin")


@pytest.fixture
def touch_variant():
    return TouchIDAuthentication("touch")


@pytest.fixture
def face_variant():
    return FaceIDAuthentication("face")


@pytest.fixture
def pin_plugin_config():
    data = {
        "module": "authflow.variants.pin.PINAuthentication",
        "name": "pin",
        "config": {"server_endpoint": "https://auth.example.com/<name>"},
    }
    return data


@pytest.fixture
def touch_plugin_config():
    data = {
        "module": "authflow.variants.touch_id.TouchIDAuthentication",
        "name": "touch",
    }
    return data


@pytest.fixture
def face_plugin_config():
    data = {
        "module": "authflow.variants.face_id.FaceIDAuthentication",
        "name": "face",
        "config": {},
    }
    return data


@pytest.fixture
def authflow_config_dict(pin_plugin_config, touch_plugin_config, face_plugin_config):
    config = {
        "VARIANTS": [pin_plugin_config, touch_plugin_config, face_plugin_config],
        "LOGGING": {"version": 1, "disable_existing_loggers": False},
    }
    return config
