from datetime import date

import pytest

from motel.core.exceptions import BusinessRuleError, ConflictError, InvalidReferenceError
from motel.schemas.common.enums import ContractStatus, RoomStatus
from motel.schemas.contract import ContractCreate, ContractExtend
from motel.services.contract_service import ContractService


def test_create_contract_occupies_room(db, factory):
    room = factory.room("K1")
    tenant = factory.tenant()

    contract = ContractService(db).create_contract(
        ContractCreate(room_id=room.id, tenant_id=tenant.id, start_date=date(2024, 1, 1))
    )

    assert contract.status == ContractStatus.ACTIVE
    db.refresh(room)
    assert room.status == RoomStatus.OCCUPIED


def test_second_active_contract_on_room_conflicts(db, factory):
    room = factory.room("K2")
    factory.contract(room, factory.tenant())

    with pytest.raises(ConflictError):
        ContractService(db).create_contract(ContractCreate(room_id=room.id, tenant_id=factory.tenant(full_name="X").id))


def test_contract_with_unknown_tenant(db, factory):
    room = factory.room("K3")
    with pytest.raises(InvalidReferenceError):
        ContractService(db).create_contract(ContractCreate(room_id=room.id, tenant_id=404))


def test_end_contract_frees_room_once(db, factory):
    room = factory.room("K4")
    contract = factory.contract(room, factory.tenant())
    service = ContractService(db)

    ended = service.end_contract(contract.id)
    assert ended.status == ContractStatus.ENDED
    db.refresh(room)
    assert room.status == RoomStatus.AVAILABLE

    factory.contract(room, factory.tenant(full_name="Next"))
    service.end_contract(contract.id)
    db.refresh(room)
    assert room.status == RoomStatus.OCCUPIED


def test_extend_before_start_is_rejected(db, factory):
    contract = factory.contract(factory.room("K5"), factory.tenant())
    service = ContractService(db)

    with pytest.raises(BusinessRuleError):
        service.extend_contract(contract.id, ContractExtend(end_date=date(2023, 12, 31)))

    extended = service.extend_contract(contract.id, ContractExtend(end_date=date(2025, 1, 1)))
    assert extended.end_date == date(2025, 1, 1)
