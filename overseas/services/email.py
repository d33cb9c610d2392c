import os
import asyncio
import logging
from datetime import datetime
from jinja2 import Environment, FileSystemLoader, select_autoescape
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail, To

from overseas.core.config import settings
from overseas.utils.events import event_bus

logger = logging.getLogger(__name__)

EMAIL_SEND_REQUESTED = "email_send_requested"

async def handle_email_send_requested(data):
    try:
        await EmailService._send_email_via_sendgrid(
            data["to_email"],
            data["subject"],
            data["template_name"],
            data["template_context"]
        )
    except Exception as e:
        logger.error(f"Failed to send email to {data['to_email']}: {e}")

event_bus.subscribe(EMAIL_SEND_REQUESTED, handle_email_send_requested)

class EmailService:
    _template_env = None

    @classmethod
    def _get_template_env(cls):
        if cls._template_env is None:
            template_dir = os.path.join(
                os.path.dirname(os.path.abspath(__file__)),
                '..',
                'templates'
            )
            cls._template_env = Environment(
                loader=FileSystemLoader(template_dir),
                autoescape=select_autoescape(['html']),
            )
        return cls._template_env

    @classmethod
    def render_template(cls, template_name: str, context: dict) -> str:
        """
        Render an email template

        :param template_name: Name of the template file
        :param context: Dictionary of template variables
        :return: Rendered HTML template
        """
        default_context = {
            'company_name': settings.BRAND_NAME,
            'theme_color': settings.BRAND_THEME_COLOR,
            'app_url': settings.APP_URL,
            'current_year': datetime.now().year,
            **context
        }
        try:
            template = cls._get_template_env().get_template(template_name)
            return template.render(**default_context)
        except Exception as e:
            logger.error(f"Error rendering email template {template_name}: {e}")
            raise

    @classmethod
    async def send_email(
        cls,
        to_email: str,
        subject: str,
        template_name: str,
        template_context: dict,
    ):
        await event_bus.publish(EMAIL_SEND_REQUESTED, {
            "to_email": to_email,
            "subject": subject,
            "template_name": template_name,
            "template_context": template_context,
            "timestamp": datetime.utcnow().isoformat()
        })

    @classmethod
    async def _send_email_via_sendgrid(
        cls,
        to_email: str,
        subject: str,
        template_name: str,
        template_context: dict,
    ):
        html_content = cls.render_template(template_name, template_context)

        if not settings.SENDGRID_API_KEY:
            logger.info(f"SENDGRID_API_KEY not configured, skipping '{subject}' email to {to_email}")
            return

        message = Mail(
            from_email=(settings.EMAILS_FROM_EMAIL, settings.EMAILS_FROM_NAME),
            to_emails=To(to_email),
            subject=subject,
            html_content=html_content
        )

        sendgrid_client = SendGridAPIClient(settings.SENDGRID_API_KEY)
        response = await asyncio.to_thread(sendgrid_client.send, message)

        if response.status_code not in (200, 201, 202):
            logger.error(f"SendGrid error: {response.status_code} - {response.body}")
            raise RuntimeError(f"SendGrid API error: {response.status_code}")

        logger.info(f"Email sent successfully to {to_email} via SendGrid")
