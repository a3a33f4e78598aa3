import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SMTP_HOST"] = ""
os.environ["SMS_ENABLED"] = "false"

from datetime import date  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import List, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from motel.api.deps import get_mailer, get_sms_sender  # noqa: E402
from motel.core.security import create_access_token, hash_password  # noqa: E402
from motel.db.init_db import drop_db, init_db  # noqa: E402
from motel.db.session import enable_sqlite_savepoints, get_db  # noqa: E402
from motel.main import app  # noqa: E402
from motel.models import Area, Contract, Invoice, MeterReading, Room, ServicePrice, Tenant, User  # noqa: E402
from motel.schemas.common.enums import ContractStatus, InvoiceStatus, RoomStatus, UserRole  # noqa: E402
from motel.utils.email import EmailError  # noqa: E402
from motel.utils.sms import SMSDeliveryError, SMSResult  # noqa: E402

PASSWORD = "secret123"


class FakeMailer:
    """Records messages instead of talking to SMTP."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[tuple] = []

    def send(self, to: str, subject: str, body: str) -> bool:
        if self.fail:
            raise EmailError("Failed to send email: connection refused")
        self.sent.append((to, subject, body))
        return True


class FakeSmsSender:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[tuple] = []

    def send(self, phone: str, message: str) -> SMSResult:
        if self.fail:
            raise SMSDeliveryError("SMS gateway returned HTTP 503")
        self.sent.append((phone, message))
        return SMSResult(success=True, status_code=200)


class Factory:
    """Inserts committed fixtures rows."""

    def __init__(self, db: Session):
        self.db = db

    def _save(self, entity):
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def user(self, username: str, role: UserRole = UserRole.TENANT, active: bool = True) -> User:
        return self._save(
            User(
                username=username,
                password_hash=hash_password(PASSWORD),
                full_name=username.title(),
                role=role,
                active=active,
            )
        )

    def area(self, name: str = "Block A") -> Area:
        return self._save(Area(name=name, address="12 Le Loi"))

    def room(
        self,
        code: str,
        price: str = "1000000",
        status: RoomStatus = RoomStatus.AVAILABLE,
        area: Optional[Area] = None,
    ) -> Room:
        return self._save(
            Room(
                code=code,
                floor="1",
                status=status,
                current_price=Decimal(price),
                area_id=area.id if area else None,
            )
        )

    def tenant(
        self,
        full_name: str = "Nguyen Van A",
        email: Optional[str] = "tenant@example.com",
        phone: Optional[str] = "0900000001",
        user: Optional[User] = None,
    ) -> Tenant:
        return self._save(
            Tenant(
                full_name=full_name,
                email=email,
                phone=phone,
                user_id=user.id if user else None,
            )
        )

    def contract(self, room: Room, tenant: Tenant, status: ContractStatus = ContractStatus.ACTIVE) -> Contract:
        if status == ContractStatus.ACTIVE:
            room.status = RoomStatus.OCCUPIED
        return self._save(
            Contract(
                room_id=room.id,
                tenant_id=tenant.id,
                start_date=date(2024, 1, 1),
                status=status,
                rent=room.current_price,
            )
        )

    def price(self, effective_from: date, electricity: str = "3000", water: str = "10000") -> ServicePrice:
        return self._save(
            ServicePrice(
                room_price=Decimal("1000000"),
                electricity_price=Decimal(electricity),
                water_price=Decimal(water),
                effective_from=effective_from,
            )
        )

    def invoice(
        self,
        room: Room,
        tenant: Optional[Tenant],
        month: int = 5,
        year: int = 2024,
        total: str = "1500000",
        status: InvoiceStatus = InvoiceStatus.UNPAID,
    ) -> Invoice:
        amount = Decimal(total)
        return self._save(
            Invoice(
                room_id=room.id,
                tenant_id=tenant.id if tenant else None,
                month=month,
                year=year,
                room_cost=amount,
                electricity_cost=Decimal("0"),
                water_cost=Decimal("0"),
                total=amount,
                status=status,
            )
        )

    def reading(self, room: Room, month: int, year: int, electricity_cost: str, water_cost: str) -> MeterReading:
        e, w = Decimal(electricity_cost), Decimal(water_cost)
        return self._save(
            MeterReading(
                room_id=room.id,
                month=month,
                year=year,
                old_electric=0,
                new_electric=0,
                old_water=0,
                new_water=0,
                electricity_cost=e,
                water_cost=w,
                total_cost=e + w,
            )
        )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_savepoints(engine)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def factory(db):
    return Factory(db)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def sms_sender():
    return FakeSmsSender()


@pytest.fixture
def client(db, mailer, sms_sender):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_sms_sender] = lambda: sms_sender
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_header(user: User) -> dict:
    token = create_access_token(subject=user.username, role=user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(factory):
    return factory.user("admin", UserRole.ADMIN)


@pytest.fixture
def staff(factory):
    return factory.user("staff", UserRole.STAFF)


@pytest.fixture
def tenant_user(factory):
    return factory.user("tenant1", UserRole.TENANT)
