from .ses_email_gateway import SesEmailGateway

__all__ = ["SesEmailGateway"]
