"""
Exceptions for authflow
"""


class AuthFlowError(Exception):
    """
    Base authflow exception
    """
    pass


class AuthFlowConfigurationError(AuthFlowError):
    """
    authflow configuration error
    """
    pass


class AuthFlowVariantError(AuthFlowError):
    """
    Raised when an object does not qualify as an authentication variant.

    This happens when the object lacks one of the authentication steps, or
    when a variant class tries to replace the fixed `authenticate` skeleton.
    """

    def __init__(self, variant, message, *args, **kwargs):
        """
        :type variant: Any
        :type message: str

        :param variant: The offending object or class
        :param message: What is wrong with it
        """
        super().__init__(message, *args, **kwargs)
        self.variant = variant
        self._message = message

    @property
    def message(self):
        """
        :rtype: str
        :return: Exception message
        """
        return self._message
