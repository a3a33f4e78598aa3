"""
Tenant endpoints.

TENANT actors listing tenants see only their own record.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.exceptions import AuthorizationError, ResourceNotFoundError
from motel.core.permissions import Operation
from motel.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from motel.services.tenant_service import TenantService

router = APIRouter(prefix="/tenants", tags=["tenants"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[TenantResponse])
def list_tenants(
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
    actor: ActorContext = Depends(require(Operation.TENANT_READ)),
    db: Session = Depends(get_db),
):
    service = TenantService(db)
    if actor.is_tenant:
        own = service.find_for_user(actor.user_id)
        return [own] if own else []
    return service.list_tenants(q)


@router.get("/me", response_model=TenantResponse)
def my_tenant_record(
    actor: ActorContext = Depends(require(Operation.TENANT_SELF)),
    db: Session = Depends(get_db),
):
    tenant = TenantService(db).find_for_user(actor.user_id)
    if tenant is None:
        raise ResourceNotFoundError("Tenant", message="No tenant record is linked to this account")
    return tenant


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(
    tenant_id: int,
    actor: ActorContext = Depends(require(Operation.TENANT_READ)),
    db: Session = Depends(get_db),
):
    tenant = TenantService(db).get_tenant(tenant_id)
    if actor.is_tenant and tenant.user_id != actor.user_id:
        raise AuthorizationError("Tenants may only view their own record")
    return tenant


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    payload: TenantCreate,
    actor: ActorContext = Depends(require(Operation.TENANT_CREATE)),
    db: Session = Depends(get_db),
):
    return TenantService(db).create_tenant(payload)


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(
    tenant_id: int,
    payload: TenantUpdate,
    actor: ActorContext = Depends(require(Operation.TENANT_WRITE)),
    db: Session = Depends(get_db),
):
    return TenantService(db).update_tenant(tenant_id, payload)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tenant(
    tenant_id: int,
    actor: ActorContext = Depends(require(Operation.TENANT_WRITE)),
    db: Session = Depends(get_db),
):
    TenantService(db).delete_tenant(tenant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
