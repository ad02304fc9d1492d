import logging
import smtplib

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def send_email(to: str, subject: str, message: str) -> bool:
    """Send a plain-text email. Delivery is best effort: failures are logged, never raised."""
    try:
        send_mail(subject, message, settings.DEFAULT_FROM_EMAIL, [to])
    except (smtplib.SMTPException, OSError) as err:
        logger.warning("Could not send email %r to %s: %s", subject, to, err)
        return False
    return True
