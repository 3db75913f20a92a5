from justai.models.user import User
from justai.models.job import Job
from justai.models.application import Application
from justai.models.payment import Payment
from justai.models.review import Review
from justai.models.testimonial import Testimonial
from justai.models.contact_message import ContactMessage

__all__ = ["User", "Job", "Application", "Payment", "Review", "Testimonial", "ContactMessage"]
