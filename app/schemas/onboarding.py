from typing import Optional
from pydantic import BaseModel

from app.schemas.client import ClientCreate, ClientRead
from app.schemas.client_property_interest import PropertyInterestFields, PropertyInterestRead
from app.schemas.communication_log import CommunicationLogFields, CommunicationLogRead
from app.schemas.client_document import ClientDocumentFields, ClientDocumentRead


# --- Main Request ---
class ClientOnboardingRequest(BaseModel):
    client: ClientCreate
    property_interest: Optional[PropertyInterestFields] = None
    communication_log: Optional[CommunicationLogFields] = None
    document: Optional[ClientDocumentFields] = None


# --- Main Response ---
class ClientOnboardingResponse(BaseModel):
    client: ClientRead
    property_interest: Optional[PropertyInterestRead] = None
    communication_log: Optional[CommunicationLogRead] = None
    document: Optional[ClientDocumentRead] = None
