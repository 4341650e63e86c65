#!/usr/bin/env python3
"""
Demo Interativa - Salão (PDV e agenda)

Permite testar o núcleo do sistema pelo console com os dados de demonstração.

Uso:
    python scripts/demo.py

Comandos:
    - 'sair' ou 'exit': Terminar
    - 'help': Ver comandos
"""
import sys
import os

# Adiciona o diretório raiz ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from datetime import date, timedelta
from decimal import InvalidOperation

from rich.console import Console
from rich.table import Table

from salao.config import logger as log
from salao.container import set_container
from salao.repositories.memory.factory import create_memory_container
from salao.services.auth import AuthSession
from salao.services.catalog import CatalogSelector
from salao.services.pdv import PointOfSale
from salao.services.payments import PaymentCollector
from salao.services.plans import cancelled_packages
from salao.services.scheduling import available_time_slots, weekday_name
from salao.services.vouchers import eligible_vouchers
from salao.services.reports import ReportColumn, paginated_report
from salao.utils.formatters import format_currency

console = Console()


def print_header():
    console.rule("[bold]SALÃO - Demo Interativa")
    console.print()


def print_help():
    console.print(
        """
Comandos disponíveis:
  sair, exit          - Terminar a demo
  aba:<tab>           - Trocar aba (service, product, combo-service, combo-product, package)
  busca:<termo>       - Filtrar itens pelo nome
  itens               - Listar itens da aba
  add:<n>             - Adicionar o item n ao carrinho
  cliente:<email>     - Selecionar cliente pelo email
  avulsa              - Venda sem cliente
  voucher:<codigo>    - Aplicar voucher
  vouchers            - Vouchers disponíveis para o cliente
  carrinho            - Ver carrinho e totais
  pagar               - Pagar com a primeira forma ativa e fechar a venda
  horarios:<emp>      - Horários livres do funcionário amanhã
  cancelados          - Pacotes cancelados
  vendas              - Relatório de vendas
  debug               - Alternar logs detalhados
  help                - Mostrar esta ajuda
"""
    )


def show_items(selector: CatalogSelector):
    table = Table(title=f"Aba: {selector.tab}")
    table.add_column("#", justify="right")
    table.add_column("Nome")
    table.add_column("Preço", justify="right")
    for i, item in enumerate(selector.visible_items(), 1):
        table.add_row(str(i), item.name, format_currency(item.price))
    console.print(table)


def show_cart(pdv: PointOfSale):
    table = Table(title="Carrinho")
    table.add_column("Item")
    table.add_column("Qtd", justify="right")
    table.add_column("Total", justify="right")
    for line in pdv.state.cart:
        label = f"{line.name} (plano)" if line.covered_by_plan else line.name
        table.add_row(label, str(line.quantity), format_currency(line.line_total))
    console.print(table)

    totals = pdv.totals
    console.print(f"Subtotal: {format_currency(totals.subtotal)}")
    console.print(f"Desconto: {format_currency(totals.discount)}")
    console.print(f"Crédito de pacote: {format_currency(totals.package_credit)}")
    console.print(f"[bold]Total: {format_currency(totals.total)}")


def run_demo():
    """Executa a demo interativa"""
    print_header()

    container = create_memory_container(seed=True)
    set_container(container)

    session = AuthSession()
    session.login_demo("lojista")
    pdv = PointOfSale(user=session.user, company=session.company)
    selector = CatalogSelector(on_select=pdv.add_item, walk_in=True)

    console.print(f"Empresa: {session.company.name}")
    console.print(f"Usuário: {session.user.name}")
    console.print("\nDigite 'help' para ver os comandos.")

    debug_mode = False

    while True:
        try:
            user_input = console.input("\n[bold]> [/]").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\n\nAté logo! 👋")
            break

        if not user_input:
            continue

        command, _, arg = user_input.partition(":")
        command = command.lower()

        if command in ["sair", "exit", "quit"]:
            console.print("\nAté logo! 👋")
            break

        if command == "help":
            print_help()
            continue

        if command == "debug":
            debug_mode = not debug_mode
            log.set_level("debug" if debug_mode else "info")
            console.print(f"🔧 Debug: {'ON' if debug_mode else 'OFF'}")
            continue

        if command == "aba":
            try:
                if not selector.set_tab(arg):
                    console.print("❌ Aba indisponível para venda avulsa")
            except ValueError as e:
                console.print(f"❌ {e}")
            continue

        if command == "busca":
            selector.set_search(arg)
            show_items(selector)
            continue

        if command == "itens":
            show_items(selector)
            continue

        if command == "add":
            items = selector.visible_items()
            try:
                item = items[int(arg) - 1]
            except (ValueError, IndexError):
                console.print(f"❌ Use add:1 a add:{len(items)}")
                continue
            selector.select(item)
            show_cart(pdv)
            continue

        if command == "cliente":
            client = container.clients.get_by_email(arg)
            if client is None:
                console.print("❌ Cliente não encontrado")
                continue
            pdv.select_client(client)
            selector.walk_in = False
            console.print(f"✅ Cliente: {client.name}")
            continue

        if command == "avulsa":
            pdv.start_walk_in_sale()
            selector.walk_in = True
            console.print("✅ Venda avulsa")
            continue

        if command == "voucher":
            console.print(pdv.apply_voucher(arg).message)
            continue

        if command == "vouchers":
            for voucher in eligible_vouchers(pdv.state.client):
                console.print(f"  {voucher.code} - {voucher.name}")
            continue

        if command == "carrinho":
            show_cart(pdv)
            continue

        if command == "pagar":
            if not pdv.start_payment():
                console.print("❌ Carrinho vazio")
                continue
            collector = PaymentCollector(pdv.totals.total, pdv.complete_sale)
            result = collector.quick_pay(collector.current_method)
            sale = result.record
            console.print(f"✅ Venda {sale.short_id} registrada: {format_currency(sale.total)}")
            pdv.reset()
            selector.walk_in = True
            continue

        if command == "horarios":
            tomorrow = date.today() + timedelta(days=1)
            slots = available_time_slots(arg or "emp-rafael", tomorrow, 30)
            free = [s.time for s in slots if not s.disabled]
            console.print(f"{weekday_name(tomorrow)}: {', '.join(free) or 'sem horários'}")
            continue

        if command == "cancelados":
            for package in cancelled_packages(arg):
                console.print(f"  {package.client_name} - {package.plan_name}")
            continue

        if command == "vendas":
            rows = [sale.to_dict() for sale in container.sales.get_all()]
            columns = [
                ReportColumn("Venda", "id", format=lambda value, row: value[:8]),
                ReportColumn("Itens", "items"),
                ReportColumn("Total", "total", format=lambda value, row: format_currency(value), align="right"),
            ]
            result = paginated_report(rows, columns, "Relatório de Vendas", session.company)
            if not result.success:
                console.print(result.message)
                continue
            for table in result.record:
                console.print(table)
            continue

        console.print("❓ Comando desconhecido. Digite 'help'.")


def main():
    """Entry point"""
    try:
        run_demo()
    except (InvalidOperation, RuntimeError) as e:
        console.print(f"\n❌ Erro: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
