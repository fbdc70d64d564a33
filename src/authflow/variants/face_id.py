"""
Face ID authentication variant
"""
import logging

import authflow.logging_util as lu
from .base import AuthenticationVariant

logger = logging.getLogger(__name__)


class FaceIDAuthentication(AuthenticationVariant):

    def check_device_capability(self):
        lu.authflow_logging(logger, logging.INFO, "Check whether device has face auth capacity..", self)

    def check_device_eligibility(self):
        lu.authflow_logging(logger, logging.INFO, "Check whether user has enrolled face for local auth..", self)

    def local_authentication(self):
        lu.authflow_logging(logger, logging.INFO, "localAuthentication via face ID..", self)

    def server_authentication(self):
        msg = "Authentication service call to {}..".format(self.server_endpoint)
        lu.authflow_logging(logger, logging.INFO, msg, self)
