"""sesmail — cliente mínimo para SendEmail do Amazon SES.

Uso:
    from sesmail import Credentials, Email, SESClient

    client = SESClient(Credentials("AKID", "secret"))
    xml = client.send(Email(to="a@x.com", sender="b@x.com", subject="Oi", body="Olá"))
"""

from sesmail.app.protocols.models import Credentials, Email, SignedRequest
from sesmail.app.use_cases.send_email import SESClient
from sesmail.utils.errors import SESError, SESRemoteRejectionError, SESTransportError

__version__ = "0.1.0"

__all__ = [
    "Credentials",
    "Email",
    "SESClient",
    "SESError",
    "SESRemoteRejectionError",
    "SESTransportError",
    "SignedRequest",
]
