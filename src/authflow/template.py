"""
The fixed authentication skeleton.

The orchestration lives in a plain function rather than on the variant
classes, so no variant can change the order of the steps.
"""
import logging

from .exception import AuthFlowVariantError

logger = logging.getLogger(__name__)

HOOK_STEPS = (
    "check_device_capability",
    "check_device_eligibility",
    "local_authentication",
)
DEFAULT_STEPS = ("internet_connectivity_check",)
MANDATORY_STEPS = ("server_authentication",)

STEP_ORDER = HOOK_STEPS + DEFAULT_STEPS + MANDATORY_STEPS


def missing_steps(variant):
    """
    List the steps `variant` does not expose as callables.

    :type variant: Any
    :rtype: list[str]
    """
    if isinstance(variant, type):
        return list(STEP_ORDER)
    return [step for step in STEP_ORDER if not callable(getattr(variant, step, None))]


def is_authentication_variant(variant):
    """
    Check that the object exposes every authentication step.

    :type variant: Any
    :rtype: bool

    :param variant: object to check
    :return: True if all steps are present, else False
    """
    return not missing_steps(variant)


def run_authentication(variant):
    """
    Run one authentication attempt.

    Every step in STEP_ORDER is called exactly once, in order. A step cannot
    abort the sequence.

    :type variant: authflow.variants.base.AuthenticationVariant
    :rtype: None

    :param variant: the variant supplying the step implementations
    :raise AuthFlowVariantError: if the object lacks one of the steps
    """
    missing = missing_steps(variant)
    if missing:
        raise AuthFlowVariantError(
            variant,
            "{} is not an authentication variant, missing steps: {}".format(type(variant).__name__, missing),
        )

    logger.debug("Starting authentication with %s", type(variant).__name__)
    for step in STEP_ORDER:
        getattr(variant, step)()
    logger.debug("Finished authentication with %s", type(variant).__name__)
