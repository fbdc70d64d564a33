"""
Touch ID (fingerprint) authentication variant
"""
import logging

import authflow.logging_util as lu
from .base import AuthenticationVariant

logger = logging.getLogger(__name__)


class TouchIDAuthentication(AuthenticationVariant):
    """
    Fingerprint authentication
    """

    def check_device_capability(self):
        lu.authflow_logging(logger, logging.INFO, "Check whether device has fingerprint auth capacity..", self)

    def check_device_eligibility(self):
        lu.authflow_logging(logger, logging.INFO, "Check whether user has enrolled fingerprint for local auth..", self)

    def local_authentication(self):
        lu.authflow_logging(logger, logging.INFO, "localAuthentication via touch ID..", self)

    def server_authentication(self):
        msg = "Authentication service call to {}..".format(self.server_endpoint)
        lu.authflow_logging(logger, logging.INFO, msg, self)
