"""Login, registration and the current session (user + company)."""

import re
import time
import uuid
from dataclasses import dataclass, replace
from typing import Optional

from pydantic import ValidationError

from ..config import logger as log
from ..config.env import (
    get_company_id,
    get_login_delay,
    get_technical_password,
    get_technical_user,
)
from ..container import get_container
from ..db.seed import DEMO_CLIENT_ID, MASTER_USER_ID
from ..domain.client import Client
from ..domain.company import Company
from ..domain.user import User
from ..models.forms import ClientForm
from .results import OperationResult

LOJISTA_LOGIN_ERROR = "Credenciais inválidas"
CLIENTE_LOGIN_ERROR = "Credenciais inválidas. Verifique seu email e senha."
TECHNICAL_LOGIN_ERROR = "Credenciais de técnico inválidas."

CONTEXT = "auth"


@dataclass
class AuthSession:
    """Who is logged in, for which company, and whether it is a demo."""

    user: Optional[User] = None
    company: Optional[Company] = None
    is_demo: bool = False
    error: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def _start(self, user: User, demo: bool = False) -> None:
        container = get_container()
        self.user = user
        self.company = container.companies.get_by_id(user.company_id or get_company_id())
        self.is_demo = demo
        self.error = ""
        log.info(CONTEXT, "Session started", user_id=user.id, role=user.role, demo=demo)

    def login_lojista(self, email: str, password: str) -> bool:
        """Shopkeeper login. Only the technical credentials are accepted."""
        container = get_container()
        if email == get_technical_user() and password == get_technical_password():
            user = container.users.get_by_id(MASTER_USER_ID)
            if user is not None:
                self._start(user)
                return True
        log.warn(CONTEXT, "Shopkeeper login failed", email=email)
        self.error = LOJISTA_LOGIN_ERROR
        return False

    def login_cliente(self, email: str, password: str) -> bool:
        """Client login by email.

        Passwords are not stored for clients, so only the email is matched.
        """
        user = get_container().users.get_by_email(email, role="cliente")
        if user is None:
            log.warn(CONTEXT, "Client login failed", email=email)
            self.error = CLIENTE_LOGIN_ERROR
            return False
        self._start(user)
        return True

    def login_demo(self, role: str) -> bool:
        """Enters the demo as shopkeeper (``lojista``) or as a client."""
        user_id = MASTER_USER_ID if role == "lojista" else DEMO_CLIENT_ID
        user = get_container().users.get_by_id(user_id)
        if user is None:
            log.error(CONTEXT, "Demo user missing", user_id=user_id)
            return False
        self._start(user, demo=True)
        return True

    def logout(self) -> None:
        log.info(CONTEXT, "Session ended", user_id=self.user.id if self.user else None)
        self.user = None
        self.company = None
        self.is_demo = False
        self.error = ""

    def register_cliente(
        self,
        name: str,
        email: str,
        phone: str,
        password: str,
        birth_date=None,
        cpf: Optional[str] = None,
    ) -> OperationResult:
        """Self sign-up from the client login screen; logs the new client in."""
        result = add_new_client(
            {"name": name, "email": email, "phone": phone, "birth_date": birth_date, "cpf": cpf}
        )
        if result.success:
            user = get_container().users.get_by_id(result.record.id)
            self._start(user)
        return result

    def update_company(self, **changes) -> Optional[Company]:
        if self.company is None:
            return None
        self.company = get_container().companies.save(replace(self.company, **changes))
        log.info(CONTEXT, "Company updated", company_id=self.company.id, fields=list(changes))
        return self.company

    def update_user(self, **changes) -> Optional[User]:
        """Partial update of the logged user, kept in sync with the users list."""
        if self.user is None:
            return None
        updated = get_container().users.update(self.user.id, **changes)
        if updated is not None:
            self.user = updated
        return updated

    def refresh(self) -> None:
        """Re-reads the logged user after another screen changed it."""
        if self.user is not None:
            self.user = find_user_by_id(self.user.id) or self.user


def find_user_by_id(user_id: str) -> Optional[User]:
    return get_container().users.get_by_id(user_id)


def _email_taken(email: str) -> bool:
    container = get_container()
    return container.users.get_by_email(email) is not None or container.clients.get_by_email(email) is not None


def _placeholder_email(name: str) -> str:
    """``ana@cliente.com``, then ``ana2@cliente.com`` and so on while taken."""
    first_name = re.sub(r"[^a-z0-9]", "", name.split()[0].lower())
    email = f"{first_name}@cliente.com"
    suffix = 2
    while _email_taken(email):
        email = f"{first_name}{suffix}@cliente.com"
        suffix += 1
    return email


def add_new_client(data: dict) -> OperationResult:
    """Creates the user and client records for a new client.

    Without an email, one is derived from the first name
    (``carlos@cliente.com``). A typed email or CPF already in use is refused.
    """
    container = get_container()

    try:
        form = ClientForm(**data)
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        log.warn("auth", "Invalid client form", error=message)
        return OperationResult(False, message)

    if form.email:
        email = form.email
        if _email_taken(email):
            return OperationResult(False, "Este email já está em uso. Busque pelo cliente existente.")
    else:
        email = _placeholder_email(form.name)
    if form.cpf and container.clients.get_by_cpf(form.cpf) is not None:
        return OperationResult(False, "Este CPF já está em uso. Busque pelo cliente existente.")

    client_id = str(uuid.uuid4())
    company_id = get_company_id()
    user = container.users.save(
        User(
            id=client_id,
            name=form.name,
            email=email,
            role="cliente",
            cpf=form.cpf,
            phone=form.phone,
            birth_date=form.birth_date,
            company_id=company_id,
            is_new_client=True,
        )
    )
    container.clients.save(
        Client(
            id=client_id,
            name=form.name,
            phone=form.phone,
            company_id=company_id,
            email=email,
            cpf=form.cpf,
            birth_date=form.birth_date,
            is_new_client=True,
        )
    )
    log.info("auth", "Client registered", client_id=client_id, email=email)
    return OperationResult(True, "Cliente cadastrado com sucesso.", user)


def technical_login(username: str, password: str) -> OperationResult:
    """Restricted-area login with the hard-coded technical credentials."""
    delay = get_login_delay()
    if delay > 0:
        time.sleep(delay)

    if username == get_technical_user() and password == get_technical_password():
        log.info("auth.technical", "Technical access granted", username=username)
        return OperationResult(True, "")

    log.warn("auth.technical", "Technical access denied", username=username)
    return OperationResult(False, TECHNICAL_LOGIN_ERROR)

