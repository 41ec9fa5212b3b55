import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import CRMError
from app.crud import client as crud_client
from app.crud import client_document as crud_document
from app.crud import client_property_interest as crud_interest
from app.crud import communication_log as crud_log
from app.crud.base import commit_or_raise
from app.schemas.onboarding import ClientOnboardingRequest, ClientOnboardingResponse

logger = logging.getLogger(__name__)


class ClientOnboardingService:

    @staticmethod
    async def onboard_client(request: ClientOnboardingRequest, db: AsyncSession) -> ClientOnboardingResponse:
        """
        Create a client and its first related records in one transaction.

        Workflow:
        1. Insert the client (flush only, to obtain its id).
        2. Insert the optional property interest, communication log and
           document, each bound to the new client id.
        3. Commit once. Any failure rolls back every step, so a client is never
           left half-onboarded.

        Raises:
            ValidationError: a referenced user (communication_log.user_id) does not exist.
            UpstreamError: storage failure.
        """
        try:
            client = await crud_client.repository.create(db, request.client.model_dump(), commit=False)

            interest = log = document = None
            if request.property_interest:
                interest = await crud_interest.repository.create(
                    db, {**request.property_interest.model_dump(), "client_id": client.id}, commit=False
                )
            if request.communication_log:
                log = await crud_log.repository.create(
                    db, {**request.communication_log.model_dump(), "client_id": client.id}, commit=False
                )
            if request.document:
                document = await crud_document.repository.create(
                    db, {**request.document.model_dump(), "client_id": client.id}, commit=False
                )
        except CRMError:
            await db.rollback()
            raise

        await commit_or_raise(db)
        logger.info("Client %s onboarded", client.id)

        return ClientOnboardingResponse.model_validate({
            "client": client,
            "property_interest": interest,
            "communication_log": log,
            "document": document,
        }, from_attributes=True)
