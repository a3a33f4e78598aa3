"""
Lease contract endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.contract import ContractCreate, ContractExtend, ContractResponse
from motel.services.contract_service import ContractService

router = APIRouter(prefix="/contracts", tags=["contracts"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[ContractResponse])
def list_contracts(
    actor: ActorContext = Depends(require(Operation.CONTRACT_READ)),
    db: Session = Depends(get_db),
):
    return ContractService(db).list_contracts()


@router.get("/me", response_model=List[ContractResponse])
def my_contracts(
    actor: ActorContext = Depends(require(Operation.CONTRACT_SELF)),
    db: Session = Depends(get_db),
):
    return ContractService(db).list_for_tenant(actor.tenant_id)


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
def create_contract(
    payload: ContractCreate,
    actor: ActorContext = Depends(require(Operation.CONTRACT_CREATE)),
    db: Session = Depends(get_db),
):
    return ContractService(db).create_contract(payload)


@router.put("/{contract_id}/extend", response_model=ContractResponse)
def extend_contract(
    contract_id: int,
    payload: ContractExtend,
    actor: ActorContext = Depends(require(Operation.CONTRACT_EXTEND)),
    db: Session = Depends(get_db),
):
    return ContractService(db).extend_contract(contract_id, payload)


@router.put("/{contract_id}/end", response_model=ContractResponse)
def end_contract(
    contract_id: int,
    actor: ActorContext = Depends(require(Operation.CONTRACT_END)),
    db: Session = Depends(get_db),
):
    return ContractService(db).end_contract(contract_id)
