# -*- coding: utf-8 -*-
"""
    authflow
    ~~~~~~~~~~~~~~~~

    A pluggable authentication flow built around a fixed step skeleton.
    Ships PIN, Touch ID and Face ID variants.

    :license: APACHE 2.0
"""
from .version import version as __version__
