from . import health, pickup_shoes, send_email, start_work, update_status

__all__ = ["health", "pickup_shoes", "send_email", "start_work", "update_status"]
