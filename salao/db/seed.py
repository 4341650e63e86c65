"""
Seed Data - Dados de demonstração

Popula um container em memória com uma barbearia de exemplo: empresa,
especialidades, formas de pagamento, catálogo (serviços, produtos, combos,
planos), vouchers, funcionários, clientes, pacotes e agendamentos do dia.

Os IDs são fixos para que telas e testes possam referenciá-los.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal

from ..config import logger as log
from ..config.env import get_company_id
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..constants.statuses import WEEKDAY_NAMES
from ..container import Container
from ..domain.appointment import Appointment
from ..domain.client import Client
from ..domain.combo import Combo, ComboItem
from ..domain.company import BusinessHours, Company
from ..domain.employee import Employee
from ..domain.payment_method import PaymentMethod
from ..domain.plan import ClientPackage, MonthlyPlan, PlanService
from ..domain.product import Product
from ..domain.service import Service
from ..domain.specialty import Specialty
from ..domain.user import User
from ..domain.voucher import Voucher

MASTER_USER_ID = "master-user"
DEMO_CLIENT_ID = "cli-com-plano"


# =============================================================================
# HORÁRIOS
# =============================================================================


def _week_schedule(start: time, end: time, break_start=None, break_end=None) -> list[BusinessHours]:
    """Segunda a sábado ativos, domingo fechado."""
    return [
        BusinessHours(
            day=day,
            start_time=start,
            end_time=end,
            break_start=break_start,
            break_end=break_end,
            active=day != "Domingo",
        )
        for day in WEEKDAY_NAMES
    ]


def demo_company(company_id: str) -> Company:
    return Company(
        id=company_id,
        document="12.345.678/0001-90",
        name="Barbearia Demo",
        phone="(11) 3456-7890",
        address="Rua das Tesouras, 123 - São Paulo/SP",
        business_hours=_week_schedule(time(8, 0), time(18, 0), time(12, 0), time(13, 0)),
        discount_limit=Decimal("20"),
        markup_limit=Decimal("15"),
    )


# =============================================================================
# CADASTROS SIMPLES
# =============================================================================

ESPECIALIDADES = [
    Specialty(id="spec-barbeiro", name="Barbeiro"),
    Specialty(id="spec-manicure", name="Manicure"),
    Specialty(id="spec-cabelereira", name="Cabelereira"),
    Specialty(id="spec-podologa", name="Podóloga", active=False),
    Specialty(id="spec-quiropraxia", name="Quiropraxia"),
    Specialty(id="spec-esteticista", name="Esteticista"),
]

FORMAS_PAGAMENTO = [
    PaymentMethod(id="pm-dinheiro", name="Dinheiro"),
    PaymentMethod(id="pm-pix", name="Pix"),
    PaymentMethod(id="pm-credito", name="Cartão de Crédito"),
    PaymentMethod(id="pm-debito", name="Cartão de Débito"),
    PaymentMethod(id="pm-fiado", name="Fiado", active=False),
]


# =============================================================================
# CATÁLOGO
# =============================================================================


def _catalog(company_id: str):
    services = [
        Service("srv-corte", "Corte Masculino", 30, Decimal("45.00"), specialty_ids=["spec-barbeiro"]),
        Service("srv-barba", "Barba", 20, Decimal("30.00"), specialty_ids=["spec-barbeiro"]),
        Service("srv-manicure", "Manicure", 50, Decimal("35.00"), specialty_ids=["spec-manicure"]),
        Service("srv-escova", "Escova", 40, Decimal("60.00"), specialty_ids=["spec-cabelereira"]),
        Service("srv-limpeza", "Limpeza de Pele", 60, Decimal("120.00"), specialty_ids=["spec-esteticista"]),
    ]
    products = [
        Product("prd-pomada", "Pomada Modeladora", 15, 5, Decimal("39.90"), company_id),
        Product("prd-shampoo", "Shampoo Anticaspa", 3, 5, Decimal("29.90"), company_id),
        Product("prd-oleo", "Óleo para Barba", 8, 3, Decimal("49.90"), company_id),
    ]
    combos = [
        Combo(
            id="cmb-corte-barba",
            name="Corte + Barba",
            type="service",
            items=[ComboItem("service", "srv-corte"), ComboItem("service", "srv-barba")],
            price=Decimal("65.00"),
            duration=50,
        ),
        Combo(
            id="cmb-kit-barba",
            name="Kit Barba Completo",
            type="product",
            items=[ComboItem("product", "prd-pomada"), ComboItem("product", "prd-oleo")],
            price=Decimal("79.90"),
            allow_discount=False,
        ),
    ]
    plans = [
        MonthlyPlan(
            id="plan-barba-cabelo",
            name="Plano Barba & Cabelo",
            price=Decimal("120.00"),
            services=[PlanService("srv-corte", 4), PlanService("srv-barba", 4)],
            validity_in_days=30,
        ),
        MonthlyPlan(
            id="plan-maos",
            name="Plano Mãos Perfeitas",
            price=Decimal("110.00"),
            services=[PlanService("srv-manicure", 4)],
            validity_in_days=30,
        ),
    ]
    return services, products, combos, plans


def _vouchers(today: date) -> list[Voucher]:
    start = today - timedelta(days=30)
    end = today + timedelta(days=365)
    return [
        Voucher(
            id="voucher-aniversario",
            name="Presente de Aniversário",
            code="NIVER10",
            description="10% de desconto no mês do aniversário",
            type="percentage",
            value=Decimal("10"),
            valid_from=start,
            valid_to=end,
            eligibility="birthday_month",
            single_use_per_client=True,
        ),
        Voucher(
            id="voucher-boas-vindas",
            name="Boas-vindas",
            code="BEMVINDO",
            description="R$ 15,00 na primeira visita",
            type="value",
            value=Decimal("15.00"),
            valid_from=start,
            valid_to=end,
            eligibility="new_clients",
            single_use_per_client=True,
        ),
        Voucher(
            id="voucher-fidelidade",
            name="Fidelidade Corte",
            code="FIEL5",
            description="Sexto corte com 50% de desconto",
            type="percentage",
            value=Decimal("50"),
            valid_from=start,
            valid_to=end,
            applies_to="services",
            eligibility="fidelity",
            fidelity_target_service_id="srv-corte",
            fidelity_target_count=5,
        ),
        Voucher(
            id="voucher-antigo",
            name="Promoção Encerrada",
            code="VELHO20",
            description="Campanha antiga",
            type="value",
            value=Decimal("20.00"),
            valid_from=start - timedelta(days=365),
            valid_to=start,
            active=False,
        ),
    ]


# =============================================================================
# PESSOAS
# =============================================================================


def _people(company_id: str, today: date):
    users = [
        User(
            id=MASTER_USER_ID,
            name="Master",
            email="master",
            role="tecnico",
            company_id=company_id,
            permissions=["*"],
            plan="prime",
        ),
        User(
            id=DEMO_CLIENT_ID,
            name="Carlos Andrade",
            email="carlos@cliente.com",
            role="cliente",
            cpf="123.456.789-01",
            phone="(11) 98765-4321",
            birth_date=date(1990, today.month, 15),
            company_id=company_id,
            plan_id="pkg-carlos",
            plan_usage={"srv-corte": 1},
            service_history=[{"service_id": "srv-corte", "date": (today - timedelta(days=20)).isoformat()}],
        ),
        User(
            id="cli-joao",
            name="João Pereira",
            email="joao@cliente.com",
            role="cliente",
            phone="(11) 91234-5678",
            birth_date=date(1985, 3, 2),
            company_id=company_id,
            service_history=[
                {"service_id": "srv-corte", "date": (today - timedelta(days=30 * n)).isoformat()}
                for n in range(1, 6)
            ],
        ),
        User(
            id="cli-maria",
            name="Maria Souza",
            email="maria@cliente.com",
            role="cliente",
            phone="(11) 99876-1234",
            birth_date=date(1995, 11, 20),
            company_id=company_id,
            is_new_client=True,
        ),
        User(
            id="cli-pedro",
            name="Pedro Alves",
            email="pedro@cliente.com",
            role="cliente",
            phone="(11) 97777-0000",
            company_id=company_id,
        ),
    ]
    clients = [
        Client(
            id=u.id,
            name=u.name,
            phone=u.phone or "",
            company_id=company_id,
            email=u.email,
            cpf=u.cpf,
            birth_date=u.birth_date,
            is_new_client=u.is_new_client,
            service_history=list(u.service_history),
            plan_id=u.plan_id,
            plan_usage=dict(u.plan_usage),
        )
        for u in users
        if u.role == "cliente"
    ]
    employees = [
        Employee(
            id="emp-rafael",
            name="Rafael Lima",
            phone="(11) 95555-1111",
            company_id=company_id,
            specialties=["spec-barbeiro"],
            commission_products=Decimal("10"),
            commission_services=Decimal("40"),
            commission_combos=Decimal("35"),
            schedule=_week_schedule(time(9, 0), time(18, 0), time(12, 0), time(13, 0)),
        ),
        Employee(
            id="emp-ana",
            name="Ana Costa",
            phone="(11) 95555-2222",
            company_id=company_id,
            specialties=["spec-manicure", "spec-cabelereira", "spec-esteticista"],
            commission_products=Decimal("10"),
            commission_services=Decimal("45"),
            commission_combos=Decimal("40"),
            schedule=_week_schedule(time(10, 0), time(19, 0)),
        ),
        Employee(
            id="emp-bruno",
            name="Bruno Dias",
            phone="(11) 95555-3333",
            company_id=company_id,
            specialties=["spec-barbeiro", "spec-cabelereira"],
            schedule=_week_schedule(time(8, 0), time(14, 0)),
            active=False,
        ),
    ]
    return users, clients, employees


def _packages(now: datetime) -> list[ClientPackage]:
    return [
        ClientPackage(
            id="pkg-carlos",
            client_id=DEMO_CLIENT_ID,
            client_name="Carlos Andrade",
            plan_id="plan-barba-cabelo",
            plan_name="Plano Barba & Cabelo",
            plan_price=Decimal("120.00"),
            status="ativo",
            request_date=now - timedelta(days=10),
            is_recurring=True,
            activation_date=now - timedelta(days=10),
            renewal_date=now + timedelta(days=20),
            expiration_date=now + timedelta(days=20),
        ),
        ClientPackage(
            id="pkg-maria",
            client_id="cli-maria",
            client_name="Maria Souza",
            plan_id="plan-maos",
            plan_name="Plano Mãos Perfeitas",
            plan_price=Decimal("110.00"),
            status="pendente",
            request_date=now - timedelta(days=1),
            is_recurring=True,
        ),
        ClientPackage(
            id="pkg-joao",
            client_id="cli-joao",
            client_name="João Pereira",
            plan_id="plan-barba-cabelo",
            plan_name="Plano Barba & Cabelo",
            plan_price=Decimal("120.00"),
            status="em-atraso",
            request_date=now - timedelta(days=70),
            is_recurring=True,
            activation_date=now - timedelta(days=70),
            renewal_date=now - timedelta(days=10),
            expiration_date=now - timedelta(days=10),
        ),
        ClientPackage(
            id="pkg-pedro",
            client_id="cli-pedro",
            client_name="Pedro Alves",
            plan_id="plan-maos",
            plan_name="Plano Mãos Perfeitas",
            plan_price=Decimal("110.00"),
            status="cancelado",
            request_date=now - timedelta(days=90),
            activation_date=now - timedelta(days=90),
            expiration_date=now - timedelta(days=60),
        ),
    ]


def _appointments(company_id: str, today: date, now: datetime) -> list[Appointment]:
    """Agendamentos de hoje, como a tela de painel espera encontrar."""
    yesterday = today - timedelta(days=1)
    return [
        Appointment("apt-1", DEMO_CLIENT_ID, "emp-rafael", "srv-corte", today, time(10, 0), time(10, 30), company_id, created_at=now),
        Appointment("apt-2", "cli-joao", "emp-ana", "srv-manicure", today, time(11, 0), time(11, 50), company_id, created_at=now),
        Appointment("apt-3", "cli-maria", "emp-rafael", "srv-barba", today, time(14, 0), time(14, 20), company_id, created_at=now),
        Appointment("apt-4", DEMO_CLIENT_ID, "emp-rafael", "srv-barba", yesterday, time(9, 0), time(9, 20), company_id, status="concluido", created_at=now),
        Appointment("apt-5", DEMO_CLIENT_ID, "emp-ana", "srv-escova", yesterday, time(15, 0), time(15, 40), company_id, status="cancelado", created_at=now),
    ]


# =============================================================================
# MAIN
# =============================================================================


def seed_all(container: Container) -> None:
    """Loads the demo data set into an empty container."""
    company_id = get_company_id()
    today = date.today()
    now = datetime.now()

    log.info("seed", "Seeding demo data", company_id=company_id)

    container.companies.save(demo_company(company_id))

    for record in ESPECIALIDADES:
        container.specialties.save(record)
    for record in FORMAS_PAGAMENTO:
        container.payment_methods.save(record)

    services, products, combos, plans = _catalog(company_id)
    for record in services:
        container.services.save(record)
    for record in products:
        container.products.save(record)
    for record in combos:
        container.combos.save(record)
    for record in plans:
        container.plans.save(record)
    for record in _vouchers(today):
        container.vouchers.save(record)

    users, clients, employees = _people(company_id, today)
    for record in users:
        container.users.save(record)
    for record in clients:
        container.clients.save(record)
    for record in employees:
        container.employees.save(record)

    for record in _packages(now):
        container.packages.save(record)
    for record in _appointments(company_id, today, now):
        container.appointments.save(record)

    container.config.set(
        ConfigKeys.SLOT_INTERVAL_MINUTES, ConfigDefaults.SLOT_INTERVAL_MINUTES, "Intervalo entre horários"
    )
    container.config.set(
        ConfigKeys.DEFAULT_PLAN_VALIDITY_DAYS, ConfigDefaults.DEFAULT_PLAN_VALIDITY_DAYS, "Validade padrão de pacotes"
    )
    container.config.set(
        ConfigKeys.REPORT_ITEMS_PER_PAGE, ConfigDefaults.REPORT_ITEMS_PER_PAGE, "Linhas por página de relatório"
    )
    container.config.set(ConfigKeys.BIRTHDAY_MESSAGE, ConfigDefaults.BIRTHDAY_MESSAGE, "Mensagem de aniversário")
    container.config.set(ConfigKeys.BIRTHDAY_VOUCHER_ID, ConfigDefaults.BIRTHDAY_VOUCHER_ID, "Voucher de aniversário")

    log.info(
        "seed",
        "Demo data ready",
        services=len(services),
        clients=len(clients),
        employees=len(employees),
    )
