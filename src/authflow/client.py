"""
Client side entry point for running authentication variants.
"""
import logging

logger = logging.getLogger(__name__)


class ClientAppAuthentication(object):
    """
    Runs authentication variants without knowing their concrete type.
    """

    @staticmethod
    def authenticate(variant):
        """
        Run one authentication attempt with the given variant.

        :type variant: authflow.variants.base.AuthenticationVariant
        :rtype: None
        """
        logger.debug("Client authentication with variant '%s'", getattr(variant, "name", None))
        variant.authenticate()

    @classmethod
    def authenticate_all(cls, variants):
        """
        Run each variant in turn.

        :type variants: Iterable[authflow.variants.base.AuthenticationVariant]
        :rtype: None
        """
        for variant in variants:
            cls.authenticate(variant)
