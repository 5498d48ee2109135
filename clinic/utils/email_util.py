# /clinic/utils/email_util.py
import os
import smtplib
import ssl
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from flask import current_app


def send_invoice_email(recipient_email: str, pdf_data: bytes, filename: str = 'invoice.pdf') -> bool:
    """
    Sends an invoice PDF to a patient as an email attachment.

    Args:
        recipient_email (str): The patient's email address.
        pdf_data (bytes): The rendered invoice.
        filename (str): Attachment file name.

    Returns:
        bool: True when the mail relay accepted the message.
    """
    mail_server = os.environ.get('MAIL_SERVER')
    mail_port = int(os.environ.get('MAIL_PORT', 587))
    mail_use_tls = os.environ.get('MAIL_USE_TLS', 'True').lower() in ['true', '1', 't']
    mail_username = os.environ.get('MAIL_USERNAME')
    mail_password = os.environ.get('MAIL_PASSWORD')
    sender_email = os.environ.get('MAIL_DEFAULT_SENDER') or mail_username

    if not all([mail_server, mail_port, mail_username, mail_password]):
        current_app.logger.error("Email server is not configured. Cannot send invoice email.")
        return False

    if not recipient_email:
        current_app.logger.error("Patient has no email address. Cannot send invoice email.")
        return False

    message = MIMEMultipart()
    message["Subject"] = "Invoice"
    message["From"] = sender_email
    message["To"] = recipient_email
    message.attach(MIMEText("Please find the attached invoice.", "plain"))

    attachment = MIMEApplication(pdf_data, _subtype="pdf")
    attachment.add_header("Content-Disposition", "attachment", filename=filename)
    message.attach(attachment)

    try:
        with smtplib.SMTP(mail_server, mail_port) as server:
            if mail_use_tls:
                server.starttls(context=ssl.create_default_context())
            server.login(mail_username, mail_password)
            server.sendmail(sender_email, recipient_email, message.as_string())
        current_app.logger.info(f"Successfully sent invoice email to {recipient_email}")
        return True
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Failed to send invoice email to {recipient_email}: {e}")
        return False
