"""Session-scoped transaction endpoints."""
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ledger_server.core.config import Settings
from ledger_server.domain.transactions import (
    InvalidTransactionError,
    LedgerService,
    TransactionCreateInput,
)
from ledger_server.interfaces.http.deps import (
    get_ledger_service,
    optional_session_id,
    require_session_id,
)
from ledger_server.schemas import (
    SummaryAmount,
    SummaryResponse,
    TransactionCreate,
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionResponse,
)

router = APIRouter()


def _set_session_cookie(response: Response, settings: Settings, session_id: str) -> None:
    response.set_cookie(
        settings.session.cookie_name,
        session_id,
        max_age=settings.session.max_age_seconds,
        path=settings.session.path,
        secure=settings.session.secure,
        httponly=settings.session.httponly,
        samesite=settings.session.samesite,
    )


@router.get("", response_model=TransactionListResponse, summary="List the session's transactions")
async def list_transactions(
    session_id: str = Depends(require_session_id),
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionListResponse:
    transactions = await service.list_transactions(session_id)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(tx) for tx in transactions],
    )


@router.get("/summary", response_model=SummaryResponse, summary="Signed total of the session's transactions")
async def transactions_summary(
    session_id: str = Depends(require_session_id),
    service: LedgerService = Depends(get_ledger_service),
) -> SummaryResponse:
    summary = await service.summarize(session_id)
    return SummaryResponse(summary=SummaryAmount(amount=summary.amount))


@router.get("/{transaction_id}", response_model=TransactionDetailResponse, summary="Fetch one transaction")
async def get_transaction(
    transaction_id: uuid.UUID,
    session_id: str = Depends(require_session_id),
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionDetailResponse:
    transaction = await service.get_transaction(session_id, transaction_id)
    if transaction is None:
        return TransactionDetailResponse(transactions=None)
    return TransactionDetailResponse(transactions=TransactionResponse.model_validate(transaction))


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response, summary="Record a transaction")
async def create_transaction(
    payload: TransactionCreate,
    request: Request,
    session_id: str | None = Depends(optional_session_id),
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    try:
        created = await service.create_transaction(
            TransactionCreateInput(title=payload.title, amount=payload.amount, type=payload.type),
            session_id=session_id,
        )
    except InvalidTransactionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    response = Response(status_code=status.HTTP_201_CREATED)
    if created.is_new_session:
        _set_session_cookie(response, request.app.state.settings, created.session_id)
    return response
