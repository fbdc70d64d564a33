"""
Holds a base class for authentication variants.
"""
import logging
from abc import ABC
from abc import abstractmethod
from typing import Any, Optional

import authflow.logging_util as lu
from ..exception import AuthFlowVariantError
from ..template import run_authentication

logger = logging.getLogger(__name__)


class AuthenticationVariant(ABC):
    """
    Base class for an authentication variant.

    Subclasses must implement `server_authentication`. The device checks and
    the local authentication are hooks: they do nothing unless overridden.
    `internet_connectivity_check` has a working default.

    `authenticate` is final. Defining it on a subclass raises
    AuthFlowVariantError when the class is created.
    """

    def __init__(self, name: Optional[str] = None, config: Optional[dict[str, Any]] = None, **kwargs: Any):
        """
        :param name: name of the plugin, defaults to the class name
        :param config: the variant config
        """
        self.name = name or type(self).__name__
        self.config = config or {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.authenticate is not AuthenticationVariant.authenticate:
            raise AuthFlowVariantError(cls, "{} must not override authenticate()".format(cls.__name__))

    def authenticate(self) -> None:
        """
        Run the full authentication sequence for this variant.
        """
        run_authentication(self)

    def check_device_capability(self) -> None:
        pass

    def check_device_eligibility(self) -> None:
        pass

    def local_authentication(self) -> None:
        pass

    def internet_connectivity_check(self) -> None:
        lu.authflow_logging(logger, logging.INFO, "Check internet connectivity here..", self)

    @abstractmethod
    def server_authentication(self) -> None:
        """
        Authenticate against the server. Every variant must supply this.
        """
        raise NotImplementedError()

    @property
    def server_endpoint(self) -> str:
        return self.config.get("server_endpoint", "authentication service")

    def __repr__(self):
        return "{}(name={!r})".format(type(self).__name__, self.name)
