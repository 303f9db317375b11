"""Account gateways used by the guided setup flow.

This module provides:
- AccountGateway base class
- HttpAccountGateway for the REST account service
"""

from recrutas.adapters.account.base import AccountGateway
from recrutas.adapters.account.http import HttpAccountGateway

__all__ = [
    "AccountGateway",
    "HttpAccountGateway",
]
