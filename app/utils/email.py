import asyncio
import logging
import os
import smtplib
from concurrent.futures import ThreadPoolExecutor
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape

logger = logging.getLogger(__name__)

# Thread pool for async email sending
executor = ThreadPoolExecutor(max_workers=3)

APP_NAME = "APPHOX MetaTrack360"
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")


def get_smtp_config():
    """SMTP host settings; port 465 means implicit TLS, anything else STARTTLS."""
    port = int(os.getenv("SMTP_PORT", 587))
    return {
        "host": os.getenv("SMTP_HOST", "smtp.gmail.com"),
        "port": port,
        "use_ssl": port == 465,
    }


def send_email_sync(to_email, subject, html_content, text_content=None):
    """Send email via SMTP. Returns True only when the server accepted it."""
    sender_email = os.getenv('MAIL_USERNAME')
    sender_password = os.getenv('MAIL_PASSWORD')
    sender_name = os.getenv('MAIL_FROM_NAME', APP_NAME)

    if not sender_email or not sender_password:
        logger.error("❌ Email credentials not configured, cannot send %r to %s", subject, to_email)
        return False

    smtp_config = get_smtp_config()

    message = MIMEMultipart("alternative")
    message["Subject"] = subject
    message["From"] = f"{sender_name} <{sender_email}>"
    message["To"] = to_email

    if text_content:
        message.attach(MIMEText(text_content, "plain"))
    message.attach(MIMEText(html_content, "html"))

    try:
        if smtp_config['use_ssl']:
            server = smtplib.SMTP_SSL(smtp_config['host'], smtp_config['port'])
        else:
            server = smtplib.SMTP(smtp_config['host'], smtp_config['port'])
            server.ehlo()
            server.starttls()
        server.ehlo()

        server.login(sender_email, sender_password)
        server.send_message(message)
        server.quit()

        logger.info("✅ Email sent to %s", to_email)
        return True

    except (smtplib.SMTPException, OSError):
        logger.exception("❌ Email to %s failed", to_email)
        return False


def build_set_password_url(token):
    return f"{FRONTEND_URL.rstrip('/')}/set-password?token={token}"


def render_set_password_email(name, set_password_url):
    """Return (subject, html, text) for the new-account email."""
    subject = f"Welcome to {APP_NAME} - Set Your Password"

    text_content = f"""
Welcome, {name}!

An account has been created for you. Open the link below to set your password:

{set_password_url}

This link will expire in one hour.

---
{APP_NAME}
    """

    html_content = f"""
<!DOCTYPE html>
<html>
<body style="margin:0;padding:0;font-family:Arial,sans-serif;">
    <h1>Welcome, {escape(name)}!</h1>
    <p>An account has been created for you. Please click the link below to set your password.</p>
    <a href="{escape(set_password_url)}" style="color: blue; text-decoration: underline;">Set Your Password</a>
    <p>This link will expire in one hour.</p>
</body>
</html>
    """
    return subject, html_content, text_content


async def send_set_password_email(email, token, name="User"):
    """Send the set-password link asynchronously. Returns True on success."""
    subject, html_content, text_content = render_set_password_email(name, build_set_password_url(token))

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, send_email_sync, email, subject, html_content, text_content)
