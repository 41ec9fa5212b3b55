from .user import User
from .client import Client
from .client_property_interest import ClientPropertyInterest
from .property import Property
from .appointment import Appointment
from .communication_log import CommunicationLog
from .client_document import ClientDocument
from .user_settings import UserSettings

__all__ = ["User", "Client", "ClientPropertyInterest", "Property", "Appointment", "CommunicationLog", "ClientDocument", "UserSettings"]
