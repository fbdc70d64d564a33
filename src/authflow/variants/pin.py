"""
PIN authentication variant
"""
import logging

import authflow.logging_util as lu
from .base import AuthenticationVariant

logger = logging.getLogger(__name__)


class PINAuthentication(AuthenticationVariant):
    """
    Authenticates with a PIN. Only talks to the server; all device checks
    are left to the defaults.
    """

    def server_authentication(self):
        msg = "Authentication service call to {}..".format(self.server_endpoint)
        lu.authflow_logging(logger, logging.INFO, msg, self)
