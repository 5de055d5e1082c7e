"""Client side of the Catrobat authentication API."""

from catauth.client.models import Credentials
from catauth.client.models import DeprecatedToken
from catauth.client.models import RegisterFailureDetail
from catauth.client.models import RegistrationRequest
from catauth.client.models import TokenResponse
from catauth.client.response import ApiResponse
from catauth.client.web_service import AuthClient
from catauth.client.web_service import WebServiceUnavailableError

__all__ = [
    "ApiResponse",
    "AuthClient",
    "Credentials",
    "DeprecatedToken",
    "RegisterFailureDetail",
    "RegistrationRequest",
    "TokenResponse",
    "WebServiceUnavailableError",
]
